# topmark:header:start
#
#   project      : TagTint
#   file         : __init__.py
#   file_relpath : src/tagtint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for TagTint.

TagTint has no configuration file: behavior is controlled by CLI options and
environment variables (`TAGTINT_LOG_LEVEL`, `FORCE_COLOR`, `NO_COLOR`).

Public modules:
    - tagtint.config.logging
"""

from __future__ import annotations
