# topmark:header:start
#
#   project      : ToolCore
#   file         : env.py
#   file_relpath : src/toolcore/config/env.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Environment-driven runtime configuration.

ToolCore has no configuration files: the few runtime knobs it honors come from
the environment so that every tool built on it behaves the same way.

Variables:
    TOOLCORE_LOG_LEVEL: internal logging level (see
        [`toolcore.config.logging`][toolcore.config.logging]).
    FORCE_COLOR: any value other than ``"0"`` forces colored output.
    NO_COLOR: when set (even empty), disables colored output.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from toolcore.config.logging import get_logger

if TYPE_CHECKING:
    from typing import TextIO

    from toolcore.config.logging import ToolcoreLogger

logger: ToolcoreLogger = get_logger(__name__)


def resolve_color_mode(*, stream: TextIO | None = None) -> bool:
    """Decide whether output written to ``stream`` should be colored.

    ``FORCE_COLOR`` (any value but ``"0"``) wins, then ``NO_COLOR`` (set, even
    empty) disables color. Otherwise color follows the stream's TTY state.

    Args:
        stream: Stream the colored text will be written to. ``None`` or a stream
            that cannot report its TTY state means no color.

    Returns:
        True if color output should be enabled, False otherwise.
    """
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError) as exc:
        # Closed or exotic stream objects
        logger.trace("isatty() failed on %r: %s", stream, exc)
        return False
