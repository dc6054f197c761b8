# topmark:header:start
#
#   project      : TagTint
#   file         : __init__.py
#   file_relpath : src/tagtint/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers for TagTint.

This package turns parsed markup into render programs and replays them
against terminal surfaces.

Public modules:
    - tagtint.rendering.api
    - tagtint.rendering.colors
    - tagtint.rendering.operations
    - tagtint.rendering.program
"""

from __future__ import annotations
