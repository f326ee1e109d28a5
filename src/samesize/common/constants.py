"""Constants used throughout the application."""

PROGRAM_NAME = "samesize"
PROGRAM_TITLE = "Find All Files With Same File Size"

# Exit status
EXIT_FAILURE = -1  # incorrect request or errors found
EXIT_SUCCESS = 1  # request completed successfully
EXIT_UNKNOWN = 0  # nothing really done

# Command line words, compared after lowercasing
HELP_WORDS = {"?", "-?", "/?", "-h", "-help"}
RECURSE_ON_WORDS = {"-s", "-s1"}
RECURSE_OFF_WORDS = {"-s0"}

# Extra spellings accepted on Windows
MSWIN_HELP_WORDS = {"/h", "/help"}
MSWIN_RECURSE_ON_WORDS = {"/s", "/s1"}
MSWIN_RECURSE_OFF_WORDS = {"/s0"}

# Minimum bucket size reported as a collision
MIN_GROUP_COUNT = 2
