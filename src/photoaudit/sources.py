"""File enumeration, archive extraction and output location helpers."""

import logging
import os
import shutil
import stat
from collections.abc import Iterable, Iterator
from datetime import datetime
from pathlib import Path

from photoaudit.models import ImageFileRef

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = [
    ".jpg",
    ".jpeg",
    ".jpe",
    ".tif",
    ".tiff",
    ".png",
    ".webp",
    ".gif",
    ".bmp",
    ".heic",
]


def make_file_ref(path: str | os.PathLike[str]) -> ImageFileRef:
    """Build an ImageFileRef for an existing file.

    Raises:
        OSError: If the file cannot be stat'ed
    """
    abs_path = os.path.abspath(path)
    st = os.stat(abs_path)
    return ImageFileRef(
        path=abs_path,
        name=os.path.basename(abs_path),
        extension=os.path.splitext(abs_path)[1].lower(),
        accessed=datetime.fromtimestamp(st.st_atime),
        read_only=not st.st_mode & stat.S_IWUSR,
    )


def iter_image_files(
    root: str | os.PathLike[str], extensions: Iterable[str] | None = None
) -> Iterator[ImageFileRef]:
    """Yield image files under ``root`` in a stable, sorted order.

    Args:
        root: Directory to walk recursively
        extensions: Lower-case extensions to keep (default: IMAGE_EXTENSIONS);
            an empty list keeps every file
    """
    wanted = {e.lower() for e in (IMAGE_EXTENSIONS if extensions is None else extensions)}
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            if wanted and os.path.splitext(filename)[1].lower() not in wanted:
                continue
            path = os.path.join(dirpath, filename)
            try:
                yield make_file_ref(path)
            except OSError as e:
                logger.warning("Skipping %s: %s", path, e)


def is_archive(path: str | os.PathLike[str]) -> bool:
    """Check if a path names an archive format shutil can unpack."""
    name = os.fspath(path).lower()
    return os.path.isfile(path) and any(
        name.endswith(ext) for _, exts, _ in shutil.get_unpack_formats() for ext in exts
    )


def extract_archive(archive: str | os.PathLike[str], dest: str | os.PathLike[str]) -> Path:
    """Unpack an archive into ``dest`` and return the destination directory."""
    dest_path = Path(dest)
    dest_path.mkdir(parents=True, exist_ok=True)
    logger.info("Extracting %s to %s", archive, dest_path)
    shutil.unpack_archive(os.fspath(archive), os.fspath(dest_path))
    return dest_path


def prepare_output_paths(
    output_dir: str | os.PathLike[str], report_name: str, map_name: str
) -> tuple[Path, Path]:
    """Create the output directory and return the report and map paths."""
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    return out / report_name, out / map_name
