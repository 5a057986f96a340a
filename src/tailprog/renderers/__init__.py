"""tailprog renderers.

Renderers convert typed AST nodes into text.

Available Renderers:
- Unparser: Renders a program tree back to canonical program source

Thread Safety:
All renderers keep their buffers local to each render() call.
Safe for concurrent use from multiple threads.

"""

from tailprog.renderers.protocol import ASTRenderer
from tailprog.renderers.unparser import Unparser, unparse

__all__ = ["ASTRenderer", "Unparser", "unparse"]
