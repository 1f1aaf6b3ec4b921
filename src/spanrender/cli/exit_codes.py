# spanrender:header:start
#
#   project      : SpanRender
#   file         : exit_codes.py
#   file_relpath : src/spanrender/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Exit codes for the SpanRender CLI.

SpanRender follows the BSD `sysexits` convention so other tooling can interpret
failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SpanRender CLI.

    Attributes:
        SUCCESS: The diagnostic was rendered.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Conflicting flags, or span arguments that do not resolve
            against the loaded files. Mirrors BSD ``EX_USAGE (64)``. Arguments
            Click itself rejects keep Click's own exit code (2).
        ENCODING_ERROR: A source file is not valid UTF-8. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: An input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: A source file could not be read. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration value. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
