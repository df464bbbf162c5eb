"""Small helpers for positional selection over BeautifulSoup results."""

from bs4 import NavigableString, PageElement, Tag
from typing import Iterable, Optional, Sequence


def eq(elements: Sequence[Tag], index: int) -> Optional[Tag]:
    """Return the element at ``index`` (negative counts from the end), or None."""
    if -len(elements) <= index < len(elements):
        return elements[index]
    return None


def text_of(elements: Iterable[Optional[Tag]]) -> str:
    """Concatenated text of the given elements; missing elements add nothing."""
    return "".join(el.get_text() for el in elements if el is not None)


def node_text(node: PageElement) -> str:
    if isinstance(node, NavigableString):
        return str(node)
    return node.get_text()


def last_child_element(elements: Iterable[Tag]) -> Optional[Tag]:
    """Last child tag across all ``elements``, in document order."""
    last = None
    for element in elements:
        children = [child for child in element.children if isinstance(child, Tag)]
        if children:
            last = children[-1]
    return last
