"""A growable text buffer used to assemble help and error messages."""

from __future__ import annotations


class DynamicString:
    """Text that is built up piece by piece and read back as one string."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def _joined(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def set(self, text: str | None) -> None:
        """Replace the whole contents; ``None`` empties the buffer."""
        self._parts = [] if text is None else [str(text)]

    def cat(self, text: str) -> None:
        """Append a string."""
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        if text:
            self._parts.append(text)

    def catc(self, char: str) -> None:
        """Append a single character."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("catc expects exactly one character")
        self._parts.append(char)

    def catf(self, fmt: str | None, *args: object) -> None:
        """Append ``fmt`` formatted with ``args`` printf-style; ``None`` is ignored."""
        if fmt is None:
            return
        self.cat(fmt % args)

    def reset(self) -> None:
        """Empty the buffer."""
        self._parts = []

    def __str__(self) -> str:
        return self._joined()

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)

    def __repr__(self) -> str:
        return f"DynamicString({self._joined()!r})"