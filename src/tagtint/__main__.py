# topmark:header:start
#
#   project      : TagTint
#   file         : __main__.py
#   file_relpath : src/tagtint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TagTint via ``python -m tagtint``.

Delegates to :func:`tagtint.cli.main.cli`, the same entry point as the
``tagtint`` console script.

Examples:
    Render a line of markup::

        python -m tagtint render "<c f='green'>ok</c>"
"""

from __future__ import annotations

from tagtint.cli.main import cli

if __name__ == "__main__":
    cli()
