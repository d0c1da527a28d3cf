"""File identity models."""

import os
from datetime import datetime

from pydantic import BaseModel, ConfigDict


def format_size(size_bytes: int | float) -> str:
    """Convert bytes to human-readable string."""
    if size_bytes < 0:
        return "N/A"
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB", "TB", "PB"]:
        if size < 1024:
            if unit == "B":
                return f"{int(size)} {unit}"
            return f"{size:.2f} {unit}"
        size /= 1024
    return f"{size:.2f} EB"


class ImageFileRef(BaseModel):
    """Identity of one source file, as handed over by the file enumerator."""

    model_config = ConfigDict(frozen=True)

    path: str
    name: str
    extension: str
    accessed: datetime | None = None
    read_only: bool = False

    @property
    def directory(self) -> str:
        """Return the directory holding the file."""
        return os.path.dirname(self.path)
