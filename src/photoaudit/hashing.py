"""Content hashing."""

import hashlib
import os

from photoaudit.models import HashTriple

DEFAULT_CHUNK_SIZE = 64 * 1024


def compute_hashes(path: str | os.PathLike[str], chunk_size: int = DEFAULT_CHUNK_SIZE) -> HashTriple:
    """Compute MD5, SHA-1 and SHA-256 digests of a file in one pass.

    Args:
        path: Path to the file
        chunk_size: Bytes read per iteration

    Returns:
        HashTriple with lowercase hex digests

    Raises:
        OSError: If the file cannot be opened or read
    """
    md5 = hashlib.md5()
    sha1 = hashlib.sha1()
    sha256 = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            md5.update(chunk)
            sha1.update(chunk)
            sha256.update(chunk)
    return HashTriple(md5=md5.hexdigest(), sha1=sha1.hexdigest(), sha256=sha256.hexdigest())
