"""Process exit codes for the rljson CLI."""

SUCCESS = 0
GENERAL_ERROR = 1
USAGE_ERROR = 2
INPUT_ERROR = 3
NOT_FOUND = 4
INTEGRITY_ERROR = 5
