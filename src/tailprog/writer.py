"""Line-buffered, indenting text writer for the unparser.

Adopts the StringBuilder pattern: finished lines are appended to a list and
joined once at the end, O(n) total vs O(n²) for repeated concatenation.

The writer keeps two buffers. Fragments are emitted onto the current line,
which is only written out (with its indentation prefix) when newline() is
called. The prefix is computed from the indent level at flush time, so a
line started before an indent() is still written at the new level.

Thread Safety:
IndentedWriter instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

from tailprog.errors import RenderError

INDENT_UNIT = "  "


class IndentedWriter:
    """Accumulates program text line by line.

    Usage:
            >>> w = IndentedWriter()
            >>> w.emit("/foo/ {")
            >>> w.newline()
            >>> w.indent()
            >>> w.emit("counter bar")
            >>> w.newline()
            >>> w.outdent()
            >>> w.emit("}")
            >>> w.newline()
            >>> w.getvalue()
            '/foo/ {\\n  counter bar\\n}\\n'

    Thread Safety:
        Instance is local to each render() call.
        No shared mutable state.

    """

    __slots__ = ("_level", "_line", "_lines")

    def __init__(self) -> None:
        self._level = 0
        self._line: list[str] = []
        self._lines: list[str] = []

    @property
    def level(self) -> int:
        """Current indent level, in steps."""
        return self._level

    @property
    def pending(self) -> str:
        """Text of the current, not yet terminated line."""
        return "".join(self._line)

    def indent(self) -> None:
        """Increase the indent level by one step."""
        self._level += 1

    def outdent(self) -> None:
        """Decrease the indent level by one step.

        Raises:
            RenderError: If the level is already zero (unbalanced blocks)
        """
        if self._level == 0:
            raise RenderError("IndentedWriter", message="outdent below level zero")
        self._level -= 1

    def prefix(self) -> str:
        """Return the indentation for the current level."""
        return INDENT_UNIT * self._level

    def emit(self, s: str) -> None:
        """Append a fragment to the current line without terminating it."""
        if s:
            self._line.append(s)

    def newline(self) -> None:
        """Terminate the current line and start an empty one."""
        self._lines.append(self.prefix() + "".join(self._line) + "\n")
        self._line.clear()

    def getvalue(self) -> str:
        """Join all terminated lines.

        The pending line is not included; call newline() first to keep it.
        """
        return "".join(self._lines)

    def __len__(self) -> int:
        """Return number of terminated lines."""
        return len(self._lines)
