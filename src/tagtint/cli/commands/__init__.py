# topmark:header:start
#
#   project      : TagTint
#   file         : __init__.py
#   file_relpath : src/tagtint/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagTint CLI subcommands."""

from __future__ import annotations
