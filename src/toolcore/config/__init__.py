# topmark:header:start
#
#   project      : ToolCore
#   file         : __init__.py
#   file_relpath : src/toolcore/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Runtime configuration for ToolCore: logging setup and environment knobs."""

from __future__ import annotations

from toolcore.config.env import resolve_color_mode

__all__ = [
    "resolve_color_mode",
]
