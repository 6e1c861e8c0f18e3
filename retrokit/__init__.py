"""Path, text encoding and file stream helpers."""

__version__ = "0.1.0"
__all__ = [
    "filestream",
    "pathio",
    "paths",
    "resolve",
    "rfile",
    "rtime",
    "specials",
    "text",
    "utf",
]