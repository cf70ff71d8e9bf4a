import logging
import re
import sys
import unicodedata

from textops.constants import (
    DEFAULT_FILENAME_REPLACEMENT,
    MAX_ASCII_CODE,
    FilenamePlatform,
)
from textops.core.common.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

NON_ALPHANUMERIC_PATTERN = re.compile(r"[^a-zA-Z0-9 ]")

# A space goes after a lowercase letter that is followed by an uppercase letter
# or digit, and after an uppercase letter that starts an "Xy" pair.
CAMEL_CASE_BOUNDARY_PATTERN = re.compile(r"([a-z](?=[A-Z0-9])|[A-Z](?=[A-Z][a-z]))")

_CONTROL_CHARS = frozenset(chr(code) for code in range(1, 32))

_INVALID_FILENAME_CHARS: dict[FilenamePlatform, frozenset[str]] = {
    FilenamePlatform.WINDOWS: frozenset('"<>|\0:*?\\/') | _CONTROL_CHARS,
    FilenamePlatform.POSIX: frozenset("\0/"),
}


def is_ascii(value: str | None) -> bool:
    """Check whether a string consists of ASCII characters only.

    An empty string is rejected rather than reported as ASCII: a caller asking
    about a string's contents expects it to hold something.

    Raises:
        InvalidArgumentError: If ``value`` is None or empty.
    """
    if not value:
        raise InvalidArgumentError(
            "value must be a non-empty string", argument="value"
        )
    return all(ord(c) <= MAX_ASCII_CODE for c in value)


def remove_non_alphanumeric(value: str | None) -> str | None:
    """Remove every character that is not a letter, a digit or a space."""
    if value is None:
        return None
    return NON_ALPHANUMERIC_PATTERN.sub("", value)


def strip_diacritics(value: str | None) -> str | None:
    """Replace diacritic characters with their base letters where possible.

    e.g. ``strip_diacritics("Éric")`` returns ``"Eric"``. Letters that have no
    canonical decomposition, such as ``ø``, are left unchanged.
    """
    if not value:
        return value

    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def to_display_text(value: str | None) -> str | None:
    """Split a camel-case string into words, e.g. "HomerSimpson" -> "Homer Simpson"."""
    if value is None:
        return None
    return CAMEL_CASE_BOUNDARY_PATTERN.sub(r"\1 ", value)


def resolve_filename_platform(
    platform: FilenamePlatform | str | None = None,
) -> FilenamePlatform:
    """Return the filename platform to use, defaulting to the running OS."""
    if platform is None:
        return (
            FilenamePlatform.WINDOWS
            if sys.platform.startswith("win")
            else FilenamePlatform.POSIX
        )
    try:
        return FilenamePlatform(platform)
    except ValueError as exc:
        choices = ", ".join(p.value for p in FilenamePlatform)
        raise InvalidArgumentError(
            f"Unknown filename platform: {platform!r}. Expected one of: {choices}",
            argument="platform",
        ) from exc


def get_invalid_filename_chars(
    platform: FilenamePlatform | str | None = None,
) -> frozenset[str]:
    """Characters that may not appear in a file name on ``platform``."""
    return _INVALID_FILENAME_CHARS[resolve_filename_platform(platform)]


def to_valid_filename(
    value: str | None,
    replacement: str = DEFAULT_FILENAME_REPLACEMENT,
    *,
    platform: FilenamePlatform | str | None = None,
) -> str | None:
    """Convert a string into a valid file name.

    Diacritics are stripped first; every remaining character outside the
    printable ASCII range or forbidden on ``platform`` is replaced with
    ``replacement``. e.g. ``to_valid_filename("08/03/2017")`` returns
    ``"08_03_2017"``.

    Args:
        value: The text to convert. None and empty strings are returned as-is.
        replacement: Text substituted for each invalid character.
        platform: ``"windows"``, ``"posix"`` or None for the running OS.

    Raises:
        InvalidArgumentError: If ``replacement`` itself contains an invalid
            file name character.
    """
    if not value:
        return value

    invalid_chars = get_invalid_filename_chars(platform)

    offending = sorted(set(replacement) & invalid_chars)
    if offending:
        raise InvalidArgumentError(
            "replacement cannot contain invalid file name characters.",
            argument="replacement",
            details={"invalid_chars": offending},
        )

    result: list[str] = []
    replaced = 0
    for c in strip_diacritics(value) or "":
        if " " <= c <= "~" and c not in invalid_chars:
            result.append(c)
        else:
            result.append(replacement)
            replaced += 1

    if replaced:
        logger.debug("Replaced %d invalid file name character(s)", replaced)
    return "".join(result)


__all__ = [
    "is_ascii",
    "remove_non_alphanumeric",
    "strip_diacritics",
    "to_display_text",
    "to_valid_filename",
    "get_invalid_filename_chars",
    "resolve_filename_platform",
]
