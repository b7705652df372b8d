import asyncio
import logging
from pathlib import Path

from .config import PACKAGE_DIR, Config


logger = logging.getLogger(__name__)


def get_absolute_path(relative_path: str) -> Path:
    """Resolve ``relative_path`` against the iconcard package directory."""
    return PACKAGE_DIR / relative_path


def _read_text(path: Path) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


async def get_static_file(file_name: str) -> str:
    """Return the contents of ``<STATIC_DIR>/<file_name>`` as a string.

    The read runs in the default thread pool so callers on the event loop
    are not blocked. Read errors are logged and re-raised unchanged.
    """
    path = Path(Config.STATIC_DIR) / file_name
    try:
        return await asyncio.to_thread(_read_text, path)
    except Exception as e:
        logger.error(f"Error reading {file_name}: {str(e)}")
        raise
