"""StringBuilder for the pending line of a CodeWriter.

inline() calls are collected as fragments and joined once when done()
commits the line, instead of re-concatenating the partial line on every
call.

Thread Safety:
StringBuilder instances are owned by a single CodeWriter.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Fragment accumulator for a single line of output.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append("public ").append("class ").append("Foo")
            >>> sb.build()
            'public class Foo'
            >>> bool(sb.clear())
            False

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment.

        Args:
            s: Fragment to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all fragments without a separator."""
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Drop all accumulated fragments.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        return self

    def __len__(self) -> int:
        """Return number of fragments (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any non-empty fragment has been appended."""
        return bool(self._parts)
