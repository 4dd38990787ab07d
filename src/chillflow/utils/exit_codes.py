"""
Exit codes for ChillFlow.

Scripts wrapping the CLI can branch on these instead of parsing output.
"""

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Operation not allowed in the current phase
ERROR_INVALID_STATE = 3

# Focus data or configuration could not be written
ERROR_STORAGE = 4

