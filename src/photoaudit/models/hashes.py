"""Content digest models."""

from pydantic import BaseModel, ConfigDict


class HashTriple(BaseModel):
    """MD5, SHA-1 and SHA-256 hex digests of one file's content.

    Empty strings mean the file could not be read.
    """

    model_config = ConfigDict(frozen=True)

    md5: str = ""
    sha1: str = ""
    sha256: str = ""

    @property
    def is_complete(self) -> bool:
        """Check if all three digests were computed."""
        return bool(self.md5 and self.sha1 and self.sha256)
