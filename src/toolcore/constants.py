# topmark:header:start
#
#   project      : ToolCore
#   file         : constants.py
#   file_relpath : src/toolcore/constants.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""ToolCore Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    TOOLCORE_VERSION: str = get_version("toolcore")
except PackageNotFoundError:
    # Running from a source tree that was never installed
    TOOLCORE_VERSION = "0.0.0+unknown"

#: Program name that bundled tools are run under (``toolcore <tool>``).
HOST_PROGRAM: str = "toolcore"
