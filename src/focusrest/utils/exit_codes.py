"""
Exit codes for focusrest.

Semantic exit codes so scripts wrapping the CLI can tell failures apart.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments, bad configuration key or value
ERROR_INVALID_ARGS = 2

# Interactive command started without a terminal on stdin
ERROR_NOT_A_TERMINAL = 3


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_A_TERMINAL: "ERROR_NOT_A_TERMINAL",
    }
    return code_names.get(code, f"UNKNOWN({code})")

