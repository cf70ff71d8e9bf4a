from enum import Enum

FLAG_PREFIX: str = "-"
FLAG_BOUNDARY: str = " -"
VERB_SEPARATOR: str = " "

MAX_ASCII_CODE: int = 127
DEFAULT_FILENAME_REPLACEMENT: str = "_"


class FilenamePlatform(str, Enum):
    """Platforms with distinct sets of characters forbidden in file names."""

    WINDOWS = "windows"
    POSIX = "posix"
