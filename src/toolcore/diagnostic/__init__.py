# topmark:header:start
#
#   project      : ToolCore
#   file         : __init__.py
#   file_relpath : src/toolcore/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Diagnostic primitives and the diagnostics engine.

Design:
    - Diagnostics are represented by immutable `Diagnostic` instances.
    - During a run they are accumulated in a mutable `DiagnosticLog` owned by a
      `DiagnosticsEngine`, which also prints them as they arrive.
    - Snapshots are exposed as an immutable `FrozenDiagnosticLog`.
"""

from __future__ import annotations

from toolcore.diagnostic.engine import (
    DiagnosticsEngine,
    DiagnosticsHandler,
    DiagnosticsPrinter,
    format_diagnostic,
    get_default_diagnostics,
    reset_default_diagnostics,
)
from toolcore.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    FrozenDiagnosticLog,
    compute_diagnostic_stats,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticStats",
    "DiagnosticsEngine",
    "DiagnosticsHandler",
    "DiagnosticsPrinter",
    "FrozenDiagnosticLog",
    "compute_diagnostic_stats",
    "format_diagnostic",
    "get_default_diagnostics",
    "reset_default_diagnostics",
]
