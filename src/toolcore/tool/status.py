# topmark:header:start
#
#   project      : ToolCore
#   file         : status.py
#   file_relpath : src/toolcore/tool/status.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Execution status of a tool run and the process-exit boundary."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, NoReturn

from toolcore.config.logging import get_logger
from toolcore.core.exit_codes import ExitCode

logger = get_logger(__name__)


class ExecutionStatus(Enum):
    """Binary outcome of one tool invocation."""

    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def exit_code(self) -> ExitCode:
        """The process exit code for this status."""
        return ExitCode.SUCCESS if self is ExecutionStatus.SUCCESS else ExitCode.FAILURE


ExitHandler = Callable[[ExecutionStatus], NoReturn]


def exit_process(status: ExecutionStatus) -> NoReturn:
    """Terminate the process with the exit code for ``status``."""
    logger.debug("Exiting with status %s (%d)", status.value, status.exit_code)
    sys.exit(int(status.exit_code))
