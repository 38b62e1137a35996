# topmark:header:start
#
#   project      : ToolCore
#   file         : filesystem.py
#   file_relpath : src/toolcore/filesystem.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Filesystem access used by the tool lifecycle.

Only the current working directory is needed. Its absence (for instance when
the directory was removed underneath the process) is an expected outcome and
is reported as ``None`` rather than raised.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from toolcore.config.logging import get_logger

logger = get_logger(__name__)


class FileSystemLike(Protocol):
    """Structural interface for the filesystem collaborator."""

    def current_working_directory(self) -> Path | None:
        """Return the absolute current working directory, or None if unavailable."""
        ...


class LocalFileSystem:
    """The local filesystem of the running process."""

    def current_working_directory(self) -> Path | None:
        """Return ``Path.cwd()``, or None when it cannot be determined."""
        try:
            return Path.cwd()
        except OSError as exc:
            logger.debug("Cannot determine the current working directory: %s", exc)
            return None


#: Shared instance used when no filesystem is injected.
local_file_system: LocalFileSystem = LocalFileSystem()
