# topmark:header:start
#
#   project      : ToolCore
#   file         : click_console.py
#   file_relpath : src/toolcore/console/click_console.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""`ConsoleLike` implementation on top of `click.echo`."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from toolcore.config.env import resolve_color_mode
from toolcore.console.api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Console writing with `click.echo`, which strips ANSI codes when color is off.

    Args:
        enable_color (bool | None): Keep ANSI codes in printed text. ``None``
            resolves it from the environment and the TTY state of ``out``.
        out (TextIO | None): Standard output; defaults to ``sys.stdout``.
        err (TextIO | None): Error output; defaults to ``sys.stderr``.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        if enable_color is None:
            enable_color = resolve_color_mode(stream=self.out)
        self.enable_color = enable_color

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Echo ``text`` to the current ``out`` stream."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def redirect_stdout_to_stderr(self) -> None:
        """Route every later `print` to ``err``."""
        self.out = self.err
