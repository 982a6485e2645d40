"""Parser turning indented bullet lines into a tree of nodes."""

import logging
from typing import Iterable, List, Optional

from models import Node

BULLET_MARKER = "- "
INDENT_WIDTH = 4


class MalformedOutlineError(ValueError):
    """Raised when indentation does not describe a valid tree."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class OutlineParser:
    """
    Builds a forest of Node objects from an exported outline.

    Each line is expected to look like ``<indent>- <text>`` where every
    level of nesting takes exactly four characters before the marker.
    The parser keeps a stack of open containers; the stack always holds
    one entry more than the indentation level of the last line.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger('garden_publisher.outline.parser')

    def parse_text(self, text: str) -> List[Node]:
        """Parse a whole document body."""
        return self.parse(text.split("\n"))

    def parse(self, lines: Iterable[str]) -> List[Node]:
        """
        Parse outline lines into the top-level forest.

        Args:
            lines: Raw lines of the outline document

        Returns:
            Top-level nodes, in input order

        Raises:
            MalformedOutlineError: If a line is nested deeper than the
                structure built so far allows
        """
        root = Node(text="")
        stack = [root]
        last_node: Optional[Node] = None

        for line_number, line in enumerate(lines, start=1):
            offset = line.find(BULLET_MARKER)

            # Only leading whitespace may precede a bullet marker
            if offset < 0 or line[:offset].strip():
                if not line.strip():
                    continue
                if last_node is None:
                    raise MalformedOutlineError(
                        f"text outside of any bullet: {line.strip()!r}", line_number
                    )
                # Continuation of a multi-line block
                last_node.text = f"{last_node.text}\n{line.strip()}"
                continue

            node = Node(text=line[offset + len(BULLET_MARKER):])
            indent = offset // INDENT_WIDTH
            current_indent = len(stack) - 1

            if indent > current_indent + 1:
                raise MalformedOutlineError(
                    f"indentation jumps from level {current_indent} to {indent}", line_number
                )

            if indent == current_indent + 1:
                parent = stack[-1].last_child()
                if parent is None:
                    raise MalformedOutlineError(
                        f"nested bullet at level {indent} has no parent", line_number
                    )
                stack.append(parent)
            elif indent < current_indent:
                del stack[indent + 1:]

            stack[-1].add_child(node)
            last_node = node

        self.logger.debug(
            f"Parsed outline into {len(root.children)} top-level nodes (depth {root.depth()})"
        )
        return root.children
