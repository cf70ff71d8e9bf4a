from __future__ import annotations

import logging

from textops.constants import FLAG_BOUNDARY, FLAG_PREFIX, VERB_SEPARATOR
from textops.core.interfaces.arg_tokenizer_interface import IArgTokenizer

logger = logging.getLogger(__name__)


def _append_token(tokens: list[str], raw: str) -> None:
    token = raw.strip()
    if token:
        tokens.append(token)


def tokenize(line: str | None) -> list[str]:
    """Split a unix-style argument line into a verb and its flag segments.

    Rules:
    - ``None``, empty or whitespace-only input yields an empty list.
    - When the line does not start with ``-`` the text before the first space
      is the verb. A line without any space is a single verb token.
    - After that, every flag segment runs from the current position up to the
      next ``" -"`` or the end of the line.
    - Tokens are trimmed and empty ones are dropped.

    A flag value containing ``" -"`` is split at that point; no quoting rules
    apply.

    Examples:
        tokenize("add -name John -age 30")
        Output: ["add", "-name John", "-age 30"]
    """
    if line is None or not line.strip():
        return []

    tokens: list[str] = []
    start = 0

    if not line.startswith(FLAG_PREFIX):
        start = line.find(VERB_SEPARATOR)
        if start == -1:
            return [line.strip()]
        _append_token(tokens, line[:start])

    while True:
        # Search strictly past the cursor so the boundary it sits on is not rematched
        boundary = line.find(FLAG_BOUNDARY, start + 1)
        if boundary == -1:
            _append_token(tokens, line[start:])
            break
        _append_token(tokens, line[start:boundary])
        start = boundary

    logger.debug("Tokenized argument line into %d token(s)", len(tokens))
    return tokens


class ArgTokenizer(IArgTokenizer):
    """Splits argument lines such as "add -name John -age 30".

    - The first bare word is the verb
    - Each ``-flag value`` run is one token
    - Stateless; one instance can be shared across threads
    """

    def tokenize(self, line: str | None) -> list[str]:
        return tokenize(line)
