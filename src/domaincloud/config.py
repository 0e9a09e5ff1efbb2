# src/domaincloud/config.py

PROJECT_NAME = "domaincloud"
VERSION = "0.3.0"

# "-" as an input reads stdin, as an output writes stdout
STDIN_SENTINEL = "-"
STDOUT_SENTINEL = "-"

# Bytes that are not valid UTF-8 round-trip unchanged from input to output
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"

# External renderer, called as: <program> --text FILE --imagefile IMAGE ...
RENDERER_PROGRAM = "wordcloud_cli"
IMAGE_WIDTH = 1500
IMAGE_HEIGHT = 1000

BINARY_PROBE_SIZE = 1024
TOP_WORDS = 10

DEFAULT_IGNORE_PATTERNS = [
    "# Default ignore patterns",
    ".git/",
    ".hg/",
    ".svn/",
    "node_modules/",
    "venv/",
    ".venv/",
    "__pycache__/",
    "dist/",
    "build/",
    ".vscode/",
    ".idea/",
    ".DS_Store",
    "*.log",
    "logs/",
    "*_cloud.png",
]
