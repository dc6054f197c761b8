# topmark:header:start
#
#   project      : TagTint
#   file         : exit_codes.py
#   file_relpath : src/tagtint/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the TagTint CLI.

TagTint aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TagTint CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        MARKUP_ERROR: Malformed markup. Mirrors BSD ``EX_DATAERR (65)``.
        INPUT_ERROR: STDIN could not be read or decoded. Mirrors BSD
            ``EX_NOINPUT (66)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    MARKUP_ERROR = 65  # EX_DATAERR
    INPUT_ERROR = 66  # EX_NOINPUT
