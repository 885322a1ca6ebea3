"""A text editor with a cursor, kept as two stacks of characters."""


class TextEditor:
    """Editable text with a cursor.

    Characters left of the cursor are kept in order; characters right of
    the cursor are kept reversed, so every edit happens at the end of a list.
    """

    _VIEW = 10

    def __init__(self) -> None:
        self._left: list[str] = []
        self._right: list[str] = []

    def __str__(self) -> str:
        return "".join(self._left) + "".join(reversed(self._right))

    def _view(self) -> str:
        return "".join(self._left[-self._VIEW:]) if self._left else ""

    def add_text(self, text: str) -> None:
        """Insert text at the cursor; the cursor ends after the inserted text."""
        self._left.extend(text)

    def delete_text(self, k: int) -> int:
        """Delete up to k characters left of the cursor and return how many went."""
        if k < 0:
            raise ValueError("cannot delete a negative number of characters")
        deleted = min(k, len(self._left))
        del self._left[len(self._left) - deleted:]
        return deleted

    def cursor_left(self, k: int) -> str:
        """Move the cursor up to k places left; return up to 10 characters left of it."""
        for _ in range(max(0, min(k, len(self._left)))):
            self._right.append(self._left.pop())
        return self._view()

    def cursor_right(self, k: int) -> str:
        """Move the cursor up to k places right; return up to 10 characters left of it."""
        for _ in range(max(0, min(k, len(self._right)))):
            self._left.append(self._right.pop())
        return self._view()