"""Loading of WXR (WordPress eXtended RSS) export files and item access."""

from __future__ import annotations

import copy
import re
from collections import Counter
from pathlib import Path
from typing import Callable

from lxml import etree

from localizer.config import NAMESPACES
from localizer.models import RecordKind

# Elements every item must carry before splitting may start
REQUIRED_FIELDS = (
    "wp:post_id",
    "wp:post_type",
    "title",
    "link",
    "guid",
    "wp:post_name",
    "content:encoded",
    "excerpt:encoded",
)
REQUIRED_ATTACHMENT_FIELDS = ("wp:post_parent",)


class MissingFieldError(ValueError):
    """Raised when an item lacks an element the splitter relies on."""

    def __init__(self, item: str, field_name: str) -> None:
        """Initialize the error.

        Args:
            item: Description of the offending item (id or position)
            field_name: The missing element, with namespace prefix
        """
        self.item = item
        self.field_name = field_name
        super().__init__(f"Item {item} has no <{field_name}> element")


def load_wxr(path: Path | str) -> etree._ElementTree:
    """Parse a WXR file, keeping CDATA sections intact.

    Args:
        path: Path to the WXR export

    Returns:
        Parsed document

    Raises:
        etree.XMLSyntaxError: If the file is not well-formed XML
    """
    parser = etree.XMLParser(strip_cdata=False)
    return etree.parse(str(path), parser)


def find_items(doc: etree._ElementTree | etree._Element) -> list[etree._Element]:
    """Return a snapshot of all channel items in document order."""
    return doc.xpath("//channel//item")


class WxrItem:
    """Field access on one <item> element.

    Reads go straight to the underlying element and writes change it in
    place, so a WxrItem never holds state of its own.
    """

    def __init__(self, elem: etree._Element) -> None:
        self.elem = elem

    def __repr__(self) -> str:
        return f"WxrItem({self.describe()})"

    def describe(self) -> str:
        found = self.elem.find("wp:post_id", NAMESPACES)
        if found is not None and found.text:
            return found.text.strip()
        return "<no id>"

    def _field(self, path: str) -> etree._Element:
        found = self.elem.find(path, NAMESPACES)
        if found is None:
            raise MissingFieldError(self.describe(), path)
        return found

    def _text(self, path: str) -> str:
        return self._field(path).text or ""

    def _set_text(self, path: str, value: str) -> None:
        self._field(path).text = value

    def _set_cdata(self, path: str, value: str) -> None:
        self._field(path).text = etree.CDATA(value) if value else ""

    @property
    def id(self) -> int:
        return int(self._text("wp:post_id").strip())

    @id.setter
    def id(self, value: int) -> None:
        self._set_text("wp:post_id", str(value))

    @property
    def kind(self) -> RecordKind:
        return RecordKind.from_post_type(self._text("wp:post_type"))

    @property
    def parent_id(self) -> int:
        # Absent on some post-like items; 0 means no parent
        found = self.elem.find("wp:post_parent", NAMESPACES)
        text = (found.text or "").strip() if found is not None else ""
        return int(text) if text else 0

    @parent_id.setter
    def parent_id(self, value: int) -> None:
        self._set_text("wp:post_parent", str(value))

    @property
    def title(self) -> str:
        return self._text("title")

    @title.setter
    def title(self, value: str) -> None:
        self._set_text("title", value)

    @property
    def content(self) -> str:
        return self._text("content:encoded")

    @content.setter
    def content(self, value: str) -> None:
        self._set_cdata("content:encoded", value)

    @property
    def excerpt(self) -> str:
        return self._text("excerpt:encoded")

    @excerpt.setter
    def excerpt(self, value: str) -> None:
        self._set_cdata("excerpt:encoded", value)

    @property
    def slug(self) -> str:
        return self._text("wp:post_name")

    @slug.setter
    def slug(self, value: str) -> None:
        self._set_text("wp:post_name", value)

    @property
    def link(self) -> str:
        return self._text("link")

    @link.setter
    def link(self, value: str) -> None:
        self._set_text("link", value)

    @property
    def guid(self) -> str:
        return self._text("guid")

    @guid.setter
    def guid(self, value: str) -> None:
        self._set_text("guid", value)

    def text_fields(self) -> tuple[str, str, str]:
        """Return (title, content, excerpt)."""
        return self.title, self.content, self.excerpt

    def add_language(self, code: str, name: str) -> None:
        """Assign the item to a language of the "language" taxonomy."""
        category = etree.SubElement(
            self.elem, "category", domain="language", nicename=code
        )
        category.text = etree.CDATA(name)

    def append(self, elem: etree._Element) -> None:
        self.elem.append(elem)

    def duplicate(self) -> WxrItem:
        """Deep copy of the item, detached from the document."""
        return WxrItem(copy.deepcopy(self.elem))

    def replace_with(self, *items: WxrItem) -> None:
        """Put ``items`` where this item stands, in order, and unlink it."""
        for item in items:
            self.elem.addprevious(item.elem)
        self.elem.getparent().remove(self.elem)


def suffix_link(link: str, suffix: str) -> str:
    """Append ``suffix`` to the last path segment, keeping a trailing slash."""
    return re.sub(r"(/?)$", lambda m: f"{suffix}{m.group(1)}", link, count=1)


def validate_items(items: list[etree._Element]) -> None:
    """Pre-flight structural check of all items.

    Args:
        items: Item elements as returned by find_items

    Raises:
        MissingFieldError: If an item lacks a required element
        ValueError: If an id is not numeric or used twice
    """
    ids: list[int] = []
    for position, elem in enumerate(items, start=1):
        item = WxrItem(elem)
        label = f"{item.describe()} (item #{position})"
        for path in REQUIRED_FIELDS:
            if elem.find(path, NAMESPACES) is None:
                raise MissingFieldError(label, path)
        if item.kind is RecordKind.ATTACHMENT:
            for path in REQUIRED_ATTACHMENT_FIELDS:
                if elem.find(path, NAMESPACES) is None:
                    raise MissingFieldError(label, path)
        try:
            ids.append(item.id)
        except ValueError as e:
            raise ValueError(f"Item {label} has a non-numeric post id") from e

    duplicates = sorted(i for i, n in Counter(ids).items() if n > 1)
    if duplicates:
        raise ValueError(f"Duplicate post ids in export: {duplicates}")


def filter_items(
    doc: etree._ElementTree, keep: Callable[[WxrItem], bool]
) -> etree._ElementTree:
    """Copy of ``doc`` holding only the items for which ``keep`` is true."""
    filtered = copy.deepcopy(doc)
    for elem in find_items(filtered):
        if not keep(WxrItem(elem)):
            elem.getparent().remove(elem)
    return filtered
