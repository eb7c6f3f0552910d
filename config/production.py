import os

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

PROMPT = os.getenv("DIRECTORY_PROMPT", "Enter command: ")

SHOW_BANNER = bool(int(os.getenv("SHOW_BANNER", "1")))

SCRIPT_ENCODING = os.getenv("SCRIPT_ENCODING", "utf-8")
