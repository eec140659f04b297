#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/ast/builder.py
"""Builder helper for constructing documents block by block.

The builder handles the bookkeeping the block segmenter needs: grouping
consecutive list items into one list and producing a finished ``Document``.
Nodes are never modified after creation; extending a list replaces the last
block with a new list node.

"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from notedoc.ast.nodes import (
    BlockQuote,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Text,
)


class DocumentBuilder:
    """Helper for building documents.

    Provides a fluent interface; every ``add_*`` method returns the builder.

    Examples
    --------
    >>> doc = (DocumentBuilder()
    ...     .add_heading(1, [Text("Title")])
    ...     .add_list_item([Text("one")], ordered=False)
    ...     .add_list_item([Text("two")], ordered=False)
    ...     .get_document())
    >>> len(doc.children[1].children)
    2

    """

    def __init__(self) -> None:
        """Initialize the builder with no blocks."""
        self.children: list[Node] = []
        self._list_closed = False

    @property
    def last_block(self) -> Optional[Node]:
        """The most recently added block, if any."""
        return self.children[-1] if self.children else None

    def add_node(self, node: Node) -> DocumentBuilder:
        """Add a block-level node as-is."""
        self.children.append(node)
        return self

    def add_nodes(self, nodes: Iterable[Node]) -> DocumentBuilder:
        """Add several block-level nodes at once."""
        self.children.extend(nodes)
        return self

    def end_list(self) -> DocumentBuilder:
        """Close the current list so the next item starts a new one."""
        self._list_closed = True
        return self

    def add_paragraph(self, content: Sequence[Text]) -> DocumentBuilder:
        """Add a paragraph with the given inline runs."""
        return self.add_node(Paragraph(children=tuple(content)))

    def add_heading(self, level: int, content: Sequence[Text]) -> DocumentBuilder:
        """Add a heading with the given level and inline runs."""
        return self.add_node(Heading(level=level, children=tuple(content)))

    def add_code_block(self, code: str, language: Optional[str] = None) -> DocumentBuilder:
        """Add a code block holding ``code`` verbatim."""
        return self.add_node(CodeBlock.from_code(code, language=language))

    def add_block_quote(self, content: Sequence[Text]) -> DocumentBuilder:
        """Add a block quote wrapping one paragraph of inline runs."""
        return self.add_node(BlockQuote(children=(Paragraph(children=tuple(content)),)))

    def add_list_item(self, content: Sequence[Text], ordered: bool, start: int = 1) -> DocumentBuilder:
        """Add a list item, continuing the previous list when possible.

        The item joins the last block only if that block is a list of the
        same kind and no :meth:`end_list` call came in between; otherwise a
        new list is started.

        Parameters
        ----------
        content : sequence of Text
            Inline runs of the item's paragraph
        ordered : bool
            True for an ordered list item, False for a bullet item
        start : int, default 1
            Number of the first item when a new ordered list is started

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        item = ListItem(children=(Paragraph(children=tuple(content)),))
        list_type = OrderedList if ordered else BulletList
        last = self.last_block

        continues = isinstance(last, list_type) and not self._list_closed
        self._list_closed = False
        if continues:
            self.children[-1] = list_type(children=(*last.children, item), **_list_attrs(last))
        elif ordered:
            self.children.append(OrderedList(children=(item,), start=start))
        else:
            self.children.append(BulletList(children=(item,)))
        return self

    def get_document(self) -> Document:
        """Get the constructed document."""
        return Document(children=tuple(self.children))


def _list_attrs(node: Node) -> dict[str, int]:
    if isinstance(node, OrderedList):
        return {"start": node.start}
    return {}
