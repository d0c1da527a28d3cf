"""Tests for content hashing."""

import pytest

from photoaudit.hashing import compute_hashes

ABC_MD5 = "900150983cd24fb0d6963f7d28e17f72"
ABC_SHA1 = "a9993e364706816aba3e25717850c26c9cd0d89d"
ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


class TestComputeHashes:
    """Test compute_hashes."""

    def test_known_digests(self, tmp_path):
        """Test digests of b'abc' against published values."""
        path = tmp_path / "abc.bin"
        path.write_bytes(b"abc")
        hashes = compute_hashes(path)
        assert hashes.md5 == ABC_MD5
        assert hashes.sha1 == ABC_SHA1
        assert hashes.sha256 == ABC_SHA256
        assert hashes.is_complete

    def test_deterministic(self, gps_jpeg):
        """Test repeated calls on the same bytes agree."""
        assert compute_hashes(gps_jpeg) == compute_hashes(gps_jpeg)

    def test_chunk_size_independent(self, tmp_path):
        """Test the chunk size does not change the digests."""
        path = tmp_path / "data.bin"
        path.write_bytes(bytes(range(256)) * 100)
        assert compute_hashes(path, chunk_size=7) == compute_hashes(path)

    def test_lowercase_hex(self, plain_jpeg):
        """Test digests are lowercase hex."""
        hashes = compute_hashes(plain_jpeg)
        for digest in (hashes.md5, hashes.sha1, hashes.sha256):
            assert digest == digest.lower()
            int(digest, 16)

    def test_missing_file(self, tmp_path):
        """Test an unreadable file raises OSError."""
        with pytest.raises(OSError):
            compute_hashes(tmp_path / "gone.jpg")
