import pytest

from gdrivekit.checksum import (
    ChecksumMismatchError,
    ChecksumType,
    NoChecksumError,
    calculate_file_checksum,
    verify_file_checksum,
)


@pytest.fixture
def empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return path


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"hello drive\n" * 10000)
    return path


def test_empty_file_digests(empty_file):
    assert calculate_file_checksum(empty_file, ChecksumType.MD5) == "d41d8cd98f00b204e9800998ecf8427e"
    assert calculate_file_checksum(empty_file, "sha1") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"
    assert (
        calculate_file_checksum(empty_file, ChecksumType.SHA256)
        == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_digest_lengths_ordered_and_hex(data_file):
    sums = [calculate_file_checksum(data_file, t) for t in ChecksumType]
    assert len(sums[0]) < len(sums[1]) < len(sums[2])
    for value in sums:
        int(value, 16)
        assert value == value.lower()


def test_different_content_differs(tmp_path, data_file):
    other = tmp_path / "other.bin"
    other.write_bytes(b"different")
    assert calculate_file_checksum(other, "md5") != calculate_file_checksum(data_file, "md5")


@pytest.mark.parametrize("kind", list(ChecksumType))
def test_verify_round_trip(data_file, kind):
    expected = calculate_file_checksum(data_file, kind)
    assert verify_file_checksum(data_file, kind, expected) is None


def test_verify_mismatch(data_file):
    with pytest.raises(ChecksumMismatchError, match="checksum mismatch: expected deadbeef"):
        verify_file_checksum(data_file, ChecksumType.MD5, "deadbeef")


def test_verify_without_expected_sum(data_file):
    with pytest.raises(NoChecksumError):
        verify_file_checksum(data_file, ChecksumType.MD5, "")


def test_unsupported_type(data_file):
    with pytest.raises(ValueError, match="unsupported checksum type: crc32"):
        calculate_file_checksum(data_file, "crc32")
    with pytest.raises(ValueError, match="unsupported checksum type"):
        verify_file_checksum(data_file, "crc32", "abc")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        calculate_file_checksum(tmp_path / "missing", ChecksumType.SHA1)