# topmark:header:start
#
#   project      : ToolCore
#   file         : __init__.py
#   file_relpath : src/toolcore/console/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""User-facing console output."""

from __future__ import annotations

from toolcore.console.api import ConsoleLike
from toolcore.console.click_console import ClickConsole

__all__ = [
    "ClickConsole",
    "ConsoleLike",
]
