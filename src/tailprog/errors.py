"""Exception classes for tailprog.

Provides standardized exceptions for error handling throughout tailprog.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tailprog.location import SourceLocation


class TailprogError(Exception):
    """Base exception for all tailprog errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(TailprogError):
    """Error during unparsing.

    Raised when the unparser meets a value that is not one of the known
    node classes. This means the tree handed over by the front-end is
    malformed; it is a bug upstream, not a problem with the program text.
    """

    def __init__(
        self,
        node_type: str,
        location: SourceLocation | None = None,
        message: str | None = None,
    ) -> None:
        """Initialize render error.

        Args:
            node_type: Class name of the offending value
            location: Where the value came from, when it carries a location
            message: Override for the default description
        """
        self.node_type = node_type
        self.location = location

        text = message or f"unparser found undefined type {node_type}"
        if location is not None:
            text += f" at {location}"
        super().__init__(text)
