"""Book tree traversal: strip frontmatter from every chapter's content"""

from dataclasses import dataclass
from typing import Any

from fmstrip.core.split import split_frontmatter
from fmstrip.util.logging import get_logger


logger = get_logger(__name__)

# Keys under which mdBook nests child book items.
CHILD_KEYS = ("sections", "items", "sub_items")

KIND_HANDLERS = {
    "Chapter":   "visit_chapter",
    "PartTitle": "visit_part_title",
    "Separator": "visit_separator",
}


@dataclass
class StripReport:
    """Counts collected while walking one book."""
    chapters: int = 0
    stripped: int = 0


def node_kind(node: Any) -> str | None:
    """Return the declared BookItem kind of node ('Chapter', 'Separator', ...), else None."""
    if isinstance(node, str):
        return node if node in KIND_HANDLERS else None
    if isinstance(node, dict) and len(node) == 1:
        key = next(iter(node))
        return key if key in KIND_HANDLERS else None
    return None


class BookWalker:
    """Visitor over mdBook's generic JSON tree, dispatching on each node's kind."""

    def __init__(self) -> None:
        self.report = StripReport()

    def visit(self, node: Any) -> None:
        kind = node_kind(node)
        handler = getattr(self, KIND_HANDLERS[kind]) if kind else self.generic_visit
        handler(node)

    def generic_visit(self, node: Any) -> None:
        """Walk containers whose kind is not declared (book root, arrays, unknown wrappers)."""
        if isinstance(node, dict):
            for value in node.values():
                self.visit(value)
        elif isinstance(node, list):
            for item in node:
                self.visit(item)

    def visit_chapter(self, node: dict) -> None:
        chapter = node["Chapter"]
        if not isinstance(chapter, dict):
            return
        self.report.chapters += 1
        content = chapter.get("content")
        if isinstance(content, str):
            body, frontmatter = split_frontmatter(content)
            if frontmatter is not None:
                self.report.stripped += 1
                logger.debug("Stripped frontmatter from %r:\n%s", chapter.get("name"), frontmatter)
            chapter["content"] = body.lstrip("\n")
        for key in CHILD_KEYS:
            if key in chapter:
                self.visit(chapter[key])

    def visit_part_title(self, node: dict) -> None:
        """Leaf kind: a part title has no content or children."""

    def visit_separator(self, node: str) -> None:
        """Leaf kind: a separator has no content or children."""


def strip_book(book: dict) -> StripReport:
    """Strip frontmatter from every chapter in book, in place. Returns the run counts."""
    walker = BookWalker()
    walker.visit(book)
    return walker.report
