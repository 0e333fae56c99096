from __future__ import annotations

import logging
import os
from pathlib import Path

from vibe.errors import PersistenceError

logger = logging.getLogger(__name__)

OUTPUT_MODE = 0o644


def write_output(path: Path, content: str) -> None:
    """Create or truncate ``path`` and write ``content`` plus one trailing newline."""
    data = (content + "\n").encode("utf-8")
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except (OSError, ValueError) as exc:
        raise PersistenceError(exc) from exc
    logger.debug("wrote %d bytes to %s", len(data), path)
