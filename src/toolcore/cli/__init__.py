# topmark:header:start
#
#   project      : ToolCore
#   file         : __init__.py
#   file_relpath : src/toolcore/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Click-based ``toolcore`` command."""
