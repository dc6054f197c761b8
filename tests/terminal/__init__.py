# topmark:header:start
#
#   project      : TagTint
#   file         : __init__.py
#   file_relpath : tests/terminal/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
