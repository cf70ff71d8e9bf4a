"""Small text utilities: argument-line tokenizing, string cleanup and colored console output."""

from textops.core.common.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    TextOpsError,
)
from textops.core.services.arg_tokenizer import ArgTokenizer, tokenize
from textops.string_utils import (
    is_ascii,
    remove_non_alphanumeric,
    strip_diacritics,
    to_display_text,
    to_valid_filename,
)

__version__ = "0.1.0"

__all__ = [
    "ArgTokenizer",
    "ConfigurationError",
    "InvalidArgumentError",
    "TextOpsError",
    "is_ascii",
    "remove_non_alphanumeric",
    "strip_diacritics",
    "to_display_text",
    "to_valid_filename",
    "tokenize",
]
