"""Forward-only cursor over the tokens of a sanitized transmission."""


class TokenCursor:
    """Reads whitespace-delimited tokens left to right.

    Examples:
        >>> cursor = TokenCursor("anyface eagle 1 spiked")
        >>> cursor.next()
        'anyface'
        >>> cursor.remaining()
        ['eagle', '1', 'spiked']
    """

    def __init__(self, text: str) -> None:
        self._tokens = text.split()
        self._position = 0

    def next(self) -> str | None:
        """Consume and return the next token, or None at the end."""
        if self._position >= len(self._tokens):
            return None
        token = self._tokens[self._position]
        self._position += 1
        return token

    def peek(self) -> str | None:
        """Return the next token without consuming it."""
        if self._position >= len(self._tokens):
            return None
        return self._tokens[self._position]

    def skip(self, count: int = 1) -> int:
        """Discard up to count tokens.

        Returns:
            Number of tokens actually discarded.
        """
        skipped = min(count, len(self._tokens) - self._position)
        self._position += skipped
        return skipped

    def remaining(self) -> list[str]:
        """Return the unconsumed tokens without consuming them."""
        return self._tokens[self._position :]

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._tokens)
