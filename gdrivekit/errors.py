"""Error types and helpers for classifying Drive API failures."""

from __future__ import annotations

import asyncio
import concurrent.futures
import re
from collections.abc import Iterator, Mapping
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any


class DriveError(Exception):
    """Base class for all errors raised by this package."""

    default_message = "drive error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class ApiError(DriveError):
    """An error response returned by the Drive API."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"googleapi: Error {code}: {message}")


class InvalidCharactersError(DriveError, ValueError):
    default_message = "path contains invalid characters"


class ObjectNotFoundError(DriveError):
    default_message = "object not found"


class PermissionDeniedError(DriveError):
    default_message = "permission denied"


class LimitExceededError(DriveError):
    default_message = "limit exceeded"


class DriveFileNotFoundError(DriveError):
    default_message = "drive file not found"


class AuthorizationFailedError(DriveError):
    default_message = "authorization failed"


class TokenEmptyError(DriveError):
    default_message = "oauth token empty - please run authorize command"


_RETRYABLE_MESSAGES = (
    "429 Too Many Requests",
    "http: can't write HTTP request on broken connection",
    "net/http: timeout awaiting response headers",
    "net/http: TLS handshake timeout",
    "connection reset by peer",
)

_CANCELLED = (asyncio.CancelledError, concurrent.futures.CancelledError)

_INTEGER = re.compile(r"[+-]?\d+")


def _chain(err: BaseException) -> Iterator[BaseException]:
    """Yield the error and every error it was raised from."""
    seen: set[int] = set()
    current: BaseException | None = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _find_api_error(err: BaseException) -> ApiError | None:
    return next((e for e in _chain(err) if isinstance(e, ApiError)), None)


def _full_text(err: BaseException) -> str:
    return ": ".join(str(e) for e in _chain(err))


def _wrap(cls: type[DriveError], message: str, cause: BaseException) -> DriveError:
    wrapped = cls(message)
    wrapped.__cause__ = cause
    return wrapped


def should_retry(err: BaseException | None) -> tuple[bool, BaseException | None]:
    """Decide whether an error deserves a retry.

    Returns a pair of the decision and the error to report, which may be a
    more specific error than the one given.
    """
    if err is None:
        return False, None

    api = _find_api_error(err)
    if api is not None:
        code, message = api.code, api.message
        if code == 403:
            if "User Rate Limit Exceeded" in message:
                return True, err
            if "Rate Limit Exceeded" in message:
                return True, err
            if "rateLimitExceeded" in message:
                return True, err
            if "userRateLimitExceeded" in message:
                return False, LimitExceededError()
            if "Quota exceeded" in message:
                return False, LimitExceededError()
        if code in (500, 502, 503, 504):
            return True, err
        if code == 404 and "File not found" in message:
            return False, ObjectNotFoundError()
        if code == 400 and "Bad Request" in message:
            return False, err
        if code == 401:
            return False, err

    chain = list(_chain(err))
    if any(isinstance(e, _CANCELLED) for e in chain):
        return False, err
    if any(isinstance(e, TimeoutError) for e in chain):
        return True, err
    if any(isinstance(e, EOFError) for e in chain):
        return True, err

    text = _full_text(err)
    if any(fragment in text for fragment in _RETRYABLE_MESSAGES):
        return True, err

    return False, err


def parse_rate_limit(headers: Mapping[str, Any] | None) -> float:
    """Return the seconds to wait given by a Retry-After header, or 0."""
    if headers is None:
        return 0.0
    retry_after = next(
        (str(value) for key, value in headers.items() if key.lower() == "retry-after"),
        "",
    )
    if not retry_after:
        return 0.0

    if _INTEGER.fullmatch(retry_after):
        return float(int(retry_after))

    try:
        date = parsedate_to_datetime(retry_after)
    except (TypeError, ValueError, IndexError):
        return 0.0
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    wait = (date - datetime.now(timezone.utc)).total_seconds()
    return wait if wait > 0 else 0.0


def translate_error(err: BaseException | None, item: str) -> BaseException | None:
    """Convert an API error into one of the package's standard errors."""
    if err is None:
        return None

    api = _find_api_error(err)
    if api is None:
        return err

    code, message = api.code, api.message
    if code == 400:
        return _wrap(DriveError, f"{item}: bad request: {err}", err)
    if code == 401:
        return _wrap(
            PermissionDeniedError,
            f"{item}: unauthorized: {PermissionDeniedError.default_message}",
            err,
        )
    if code == 403:
        if "Rate Limit Exceeded" in message:
            return _wrap(DriveError, f"{item}: rate limit exceeded: {err}", err)
        if "User Rate Limit Exceeded" in message:
            return _wrap(DriveError, f"{item}: user rate limit exceeded: {err}", err)
        if "Quota exceeded" in message:
            return _wrap(
                LimitExceededError,
                f"{item}: quota exceeded: {LimitExceededError.default_message}",
                err,
            )
        return _wrap(
            PermissionDeniedError,
            f"{item}: access denied: {PermissionDeniedError.default_message}",
            err,
        )
    if code == 404:
        return ObjectNotFoundError()
    if code == 409:
        return _wrap(DriveError, f"{item}: conflict: {err}", err)
    if code == 410:
        return _wrap(DriveError, f"{item}: item gone: {err}", err)
    if code == 500:
        return _wrap(DriveError, f"{item}: internal server error: {err}", err)
    return err


def process_error(err: BaseException | None) -> BaseException | None:
    """Extract a more meaningful error from an API or OAuth failure."""
    if err is None:
        return None

    if isinstance(err, ApiError):
        if err.code == 404:
            return DriveFileNotFoundError()
        if err.code == 401:
            return AuthorizationFailedError()
        if err.code == 403:
            return _wrap(DriveError, f"access denied: {err.message}", err)
        return _wrap(DriveError, f"API error: {err.message}", err)

    text = str(err)
    if text == "oauth2: token expired and refresh token is not set":
        return TokenEmptyError()
    if "token has expired" in text:
        return _wrap(
            AuthorizationFailedError,
            f"authorization token expired: {AuthorizationFailedError.default_message}",
            err,
        )
    if "invalid_grant" in text:
        return _wrap(
            AuthorizationFailedError,
            f"invalid or expired refresh token: {AuthorizationFailedError.default_message}",
            err,
        )
    return err