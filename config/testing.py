import os

DEBUG = False
TESTING = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

# No prompt and no banner so captured output only holds command results
PROMPT = ""

SHOW_BANNER = False

SCRIPT_ENCODING = "utf-8"
