import os

DEBUG = bool(int(os.getenv("DEBUG", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Printed before every read when stdin is interactive
PROMPT = os.getenv("DIRECTORY_PROMPT", "Enter command: ")

SHOW_BANNER = bool(int(os.getenv("SHOW_BANNER", "1")))

# Encoding used for `run --script FILE`
SCRIPT_ENCODING = os.getenv("SCRIPT_ENCODING", "utf-8")
