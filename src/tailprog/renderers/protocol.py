"""Renderer protocol shared by the unparser and its callers.

Code that turns a tree into text, such as the command line, is typed against
ASTRenderer rather than Unparser, so a different output style can be dropped
in without touching the caller.

Example:
    from tailprog.renderers.protocol import ASTRenderer

    def show(renderer: ASTRenderer, program: StatementList) -> None:
        print(renderer.render(program), end="")

"""

from typing import Protocol

from tailprog.nodes import Node


class ASTRenderer(Protocol):
    """Anything with ``render(node) -> str``. ``Unparser`` is one."""

    def render(self, node: Node) -> str:
        """Return the text for the tree rooted at ``node``.

        Raises:
            RenderError: If the tree is malformed.

        """
        ...
