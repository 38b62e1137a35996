# topmark:header:start
#
#   project      : ToolCore
#   file         : main.py
#   file_relpath : src/toolcore/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""The ``toolcore`` command: a Click group dispatching to bundled tools.

Each tool subcommand forwards its raw arguments untouched to the tool, which
parses them with its own lifecycle. Click only routes.
"""

from __future__ import annotations

import click

from toolcore.config.logging import get_logger, setup_logging
from toolcore.console.click_console import ClickConsole
from toolcore.constants import HOST_PROGRAM, TOOLCORE_VERSION
from toolcore.tools.digest import DigestTool

logger = get_logger(__name__)

#: Click context settings for subcommands that hand their arguments to a tool.
PASSTHROUGH_SETTINGS = {
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "help_option_names": [],
}


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="ToolCore CLI",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Entry point for the ToolCore CLI."""
    ctx.obj = ctx.obj or {}
    setup_logging()
    ctx.obj.setdefault("console", ClickConsole())


@cli.command(
    name="digest",
    context_settings=PASSTHROUGH_SETTINGS,
    help="Print a checksum for each file (arguments are passed to the tool).",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def digest_command(args: tuple[str, ...]) -> None:
    """Run the ``digest`` tool."""
    logger.debug("Dispatching to digest: %r", args)
    DigestTool(list(args), host_program=HOST_PROGRAM).run()


@cli.command(name="version", help="Show the installed ToolCore version.")
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Print the version."""
    console: ClickConsole = ctx.obj["console"]
    console.print(TOOLCORE_VERSION)


if __name__ == "__main__":
    cli()
