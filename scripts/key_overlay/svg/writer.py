"""Writing rendered documents to disk."""

import logging
import os
import stat
import tempfile
from pathlib import Path

from ..layout import Layout
from .document import render_document

logger = logging.getLogger(__name__)


def _file_mode(path: Path) -> int:
    """Permission bits for ``path``: kept from an existing file, else from the umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_document(layout: Layout, path: Path) -> Path:
    """Render a layout and write it to ``path``.

    The document is written to a temporary file next to ``path`` and renamed
    into place once flushed, so ``path`` never holds a truncated document.
    The temporary file is removed on failure and the OSError propagates.

    Args:
        layout: Computed layout
        path: Destination file

    Returns:
        The destination path
    """
    content = render_document(layout)
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates the file owner-only
        os.chmod(tmp_name, _file_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), path)
    return path
