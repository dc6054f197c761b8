# topmark:header:start
#
#   project      : TagTint
#   file         : __init__.py
#   file_relpath : src/tagtint/markup/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup parsing and color scope resolution.

Public modules:
    - tagtint.markup.nodes: the markup node tree
    - tagtint.markup.parser: markup text to node tree
    - tagtint.markup.resolver: node tree to render operations
    - tagtint.markup.errors: `MarkupSyntaxError`
"""

from __future__ import annotations
