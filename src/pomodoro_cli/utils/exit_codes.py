"""
Exit codes for Pomodoro CLI.

Scripts wrapping the timer can use these to tell a clean quit from a failed
work log write.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or configuration value
ERROR_INVALID_ARGS = 2

# Terminal or work log I/O failure
ERROR_IO = 3

# Interrupted with Ctrl-C (128 + SIGINT)
ERROR_INTERRUPTED = 130


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_IO: "ERROR_IO",
        ERROR_INTERRUPTED: "ERROR_INTERRUPTED",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or configuration value",
        ERROR_IO: "Could not read input or write output or the work log",
        ERROR_INTERRUPTED: "Interrupted by user",
    }
    return descriptions.get(code, "Unknown error")
