"""Source location tracking for diagnostics.

Provides SourceLocation, the position record attached to every AST node by
the front-end that built the tree. Locations are used in error messages only;
they never affect rendered program text.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a node in program source.

    Lines are 1-indexed (0 means unknown). Columns are 0-indexed and
    inclusive, matching the way the lexer reports token spans.

    Attributes:
        line: Line number (1-indexed, 0 when unknown)
        start_col: First column of the span
        end_col: Last column of the span
        filename: Program file the node came from (optional)

    Examples:
            >>> loc = SourceLocation(line=3, start_col=4, end_col=9, filename="apache.mtail")
            >>> str(loc)
            'apache.mtail:3:4-9'

    """

    line: int
    start_col: int = 0
    end_col: int = 0
    filename: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "prog.mtail:10:5-8" or "10:5"
        """
        cols = f"{self.start_col}"
        if self.end_col != self.start_col:
            cols += f"-{self.end_col}"
        if self.filename:
            return f"{self.filename}:{self.line}:{cols}"
        return f"{self.line}:{cols}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Use for nodes created synthetically, e.g. by a tree transform.
        """
        return cls(line=0)
