"""Constants and user-facing messages.

Note: Keep command prefixes and message templates here so the parser, the
handlers and the tests agree on one spelling.
"""

QUIT_WORD = "quit"
ADD_PREFIX = "Add "
ADD_SEPARATOR = " to "
LIST_ALL_PREFIX = "List all"
LIST_PREFIX = "List "

MSG_ADDED = "Added {name} to {department}"
MSG_PEOPLE_IN = "People in {department}:"
MSG_DEPARTMENT_NOT_FOUND = "Department: {department} not found"
MSG_LISTING_ALL = "Listing by departments:"
MSG_EXITING = "Exiting"
MSG_INVALID = "Invalid command."
MSG_INVALID_ADD = "Invalid command: could not parse Add command."
MSG_INVALID_LIST = "Invalid command. Did you mean List [Department]?"

BANNER_LINES = (
    "Starting Directory Program",
    "Commands: ",
    "  Add [Name] to [Department]",
    "  List [Department]",
    "  List all",
    "  Quit",
)

PIG_LATIN_SUFFIX = "ay"
PIG_LATIN_SEPARATOR = "-"

# Undecodable input bytes become U+FFFD so the line parses as Invalid
INPUT_DECODE_ERRORS = "replace"
