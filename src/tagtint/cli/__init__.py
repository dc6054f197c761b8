# topmark:header:start
#
#   project      : TagTint
#   file         : __init__.py
#   file_relpath : src/tagtint/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for TagTint.

Entry point: `tagtint.cli.main.cli` (installed as the ``tagtint`` script).
"""

from __future__ import annotations
