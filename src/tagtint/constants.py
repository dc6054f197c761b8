# topmark:header:start
#
#   project      : TagTint
#   file         : constants.py
#   file_relpath : src/tagtint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagTint Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TAGTINT_VERSION: str = get_version("tagtint")
