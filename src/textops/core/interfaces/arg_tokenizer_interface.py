from __future__ import annotations

from typing import Protocol


class IArgTokenizer(Protocol):
    """Splits a raw argument line into an ordered list of tokens.

    Implementations should be pure and side-effect free.
    """

    def tokenize(self, line: str | None) -> list[str]:
        """Split an argument line into a verb and flag segments.

        Args:
            line: Raw argument line (may be None, empty or whitespace-only)

        Returns:
            The trimmed tokens in their original left-to-right order. Returns
            an empty list when the line holds no tokens.
        """
        ...
