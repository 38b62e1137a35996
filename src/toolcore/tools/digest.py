# topmark:header:start
#
#   project      : ToolCore
#   file         : digest.py
#   file_relpath : src/toolcore/tools/digest.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""``digest``: print file checksums.

Writes one ``<hexdigest>  <path>`` line per input to standard output, in the
format of ``sha256sum`` and friends. Problems with individual inputs are
reported as diagnostics and do not stop the remaining files from being hashed;
the run still fails at the end if any input could not be hashed.

With ``--pipe`` all informational output (the ``--summary`` line and
diagnostics) goes to standard error, keeping standard output for digests only.
"""

from __future__ import annotations

import hashlib
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from toolcore.arguments.definition import ArgumentDefinition
from toolcore.arguments.types import EnumChoiceParam
from toolcore.config.logging import get_logger, setup_logging
from toolcore.tool.lifecycle import ToolLifecycle
from toolcore.tool.runner import CommandLineTool

if TYPE_CHECKING:
    from collections.abc import Sequence

    from toolcore.arguments.binder import ArgumentBinder
    from toolcore.arguments.parser import ArgumentParser, ParseResult
    from toolcore.console.api import ConsoleLike
    from toolcore.diagnostic.engine import DiagnosticsEngine
    from toolcore.filesystem import FileSystemLike
    from toolcore.tool.status import ExitHandler

logger = get_logger(__name__)

TOOL_NAME = "digest"
USAGE = "[--algorithm NAME] [--summary] [--pipe] <file>..."
OVERVIEW = "Print a checksum for each file."
SEE_ALSO = "sha256sum(1)"

_CHUNK_SIZE = 1 << 16


class DigestAlgorithm(Enum):
    """Supported hash algorithms (values are ``hashlib`` names)."""

    SHA256 = "sha256"
    SHA1 = "sha1"
    MD5 = "md5"
    BLAKE2B = "blake2b"


@dataclass
class DigestOptions:
    """Options of the ``digest`` tool."""

    paths: list[Path] = field(default_factory=lambda: [])
    algorithm: DigestAlgorithm = DigestAlgorithm.SHA256
    summary: bool = False
    pipe: bool = False


class DigestArguments(ArgumentDefinition[DigestOptions]):
    """Command line of the ``digest`` tool."""

    options_type = DigestOptions

    @classmethod
    def define_arguments(
        cls, parser: ArgumentParser, binder: ArgumentBinder[DigestOptions]
    ) -> None:
        paths = parser.add_argument("paths", nargs=-1, required=False)
        algorithm = parser.add_option(
            "--algorithm",
            "-a",
            type=EnumChoiceParam(DigestAlgorithm),
            default=DigestAlgorithm.SHA256,
            help="Hash algorithm.",
        )
        summary = parser.add_option(
            "--summary", is_flag=True, help="Print a count of hashed files."
        )
        pipe = parser.add_option(
            "--pipe", is_flag=True, help="Send informational output to stderr."
        )

        binder.bind(
            paths, lambda options, values: setattr(options, "paths", [Path(v) for v in values])
        )
        binder.bind_field(algorithm)
        binder.bind_field(summary)
        binder.bind_field(pipe)

    @classmethod
    def postprocess_parse_result(cls, result: ParseResult, diagnostics: DiagnosticsEngine) -> None:
        if not result.values.get("paths"):
            diagnostics.emit_error("no input files")


def hash_file(path: Path, algorithm: DigestAlgorithm) -> str:
    """Return the hex digest of the file at ``path``."""
    hasher = hashlib.new(algorithm.value)
    with path.open("rb") as fh:
        for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


class DigestTool(CommandLineTool[DigestOptions]):
    """Print checksums for files.

    Args:
        args (Sequence[str]): Raw arguments, without the program name.
        data_stream (TextIO | None): Where digests are written; defaults to
            ``sys.stdout``. Unaffected by ``--pipe``.
        host_program (str | None): Program name used in messages.
        diagnostics (DiagnosticsEngine | None): Diagnostics engine to report into.
        filesystem (FileSystemLike | None): Working-directory source.
        console (ConsoleLike | None): Console for informational output.
        exit_handler (ExitHandler | None): Process-exit boundary.
    """

    def __init__(
        self,
        args: Sequence[str],
        *,
        data_stream: TextIO | None = None,
        host_program: str | None = None,
        diagnostics: DiagnosticsEngine | None = None,
        filesystem: FileSystemLike | None = None,
        console: ConsoleLike | None = None,
        exit_handler: ExitHandler | None = None,
    ) -> None:
        self._base: ToolLifecycle[DigestOptions] = ToolLifecycle(
            DigestArguments,
            TOOL_NAME,
            USAGE,
            OVERVIEW,
            args,
            SEE_ALSO,
            host_program=host_program,
            diagnostics=diagnostics,
            filesystem=filesystem,
            console=console,
            exit_handler=exit_handler,
        )
        self.data_stream: TextIO = data_stream if data_stream is not None else sys.stdout

    @property
    def base(self) -> ToolLifecycle[DigestOptions]:
        return self._base

    def run_impl(self) -> None:
        options = self.options
        if options.pipe:
            self.redirect_stdout_to_stderr()

        hashed = 0
        for path in options.paths:
            resolved = path if path.is_absolute() else self.original_working_directory / path
            if not resolved.exists():
                self.diagnostics.emit_error("no such file", location=str(path))
                continue
            if resolved.is_dir():
                self.diagnostics.emit_warning("is a directory, skipped", location=str(path))
                continue
            try:
                digest = hash_file(resolved, options.algorithm)
            except OSError as exc:
                self.diagnostics.emit_error(exc.strerror or str(exc), location=str(path))
                continue
            self.data_stream.write(f"{digest}  {path}\n")
            hashed += 1

        logger.debug("Hashed %d of %d input(s)", hashed, len(options.paths))
        if options.summary:
            noun = "file" if hashed == 1 else "files"
            self.console.print(f"hashed {hashed} {noun} with {options.algorithm.value}")


def main(args: Sequence[str] | None = None, *, host_program: str | None = None) -> None:
    """Console-script entry point for ``toolcore-digest``."""
    setup_logging()
    DigestTool(sys.argv[1:] if args is None else args, host_program=host_program).run()
