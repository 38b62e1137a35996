# topmark:header:start
#
#   project      : ToolCore
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""CLI test helpers for running ``toolcore`` in a controlled working directory.

Tools capture the working directory when they are constructed and resolve
relative inputs against it, so CLI tests run from a temporary directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Sequence

import pytest
from click.testing import CliRunner, Result

from toolcore.cli.main import cli


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the ``toolcore`` group with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory to run the command from.
        argv (Sequence[str]): Arguments after ``toolcore``, e.g. ``["digest", "a.txt"]``.

    Returns:
        Result: The `click.testing.Result` of the invocation. Standard output and
            standard error are both part of ``Result.output``.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


CliInvoker = Callable[[Path, Sequence[str]], Result]


@pytest.fixture
def run_cli() -> CliInvoker:
    """Expose `run_cli_in` to CLI test modules."""
    return run_cli_in
