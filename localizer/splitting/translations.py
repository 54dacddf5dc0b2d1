"""Polylang translation links (the ``_translations`` meta value)."""

from __future__ import annotations

from collections.abc import Mapping

from lxml import etree

from localizer.config import WP_NS


def serialize_translations(ids: Mapping[str, int]) -> str:
    """Serialize language -> id pairs the way PHP's serialize() does.

    Example: {"en": 500, "it": 501} -> a:2:{s:2:"en";i:500;s:2:"it";i:501;}
    """
    entries = "".join(
        f's:{len(code.encode("utf-8"))}:"{code}";i:{item_id};'
        for code, item_id in ids.items()
    )
    return f"a:{len(ids)}:{{{entries}}}"


def build_translation_link(ids: Mapping[str, int]) -> etree._Element:
    """Build a detached <wp:postmeta> entry linking the language versions.

    The element may only be placed once in a tree; attach deep copies.
    """
    postmeta = etree.Element(f"{{{WP_NS}}}postmeta", nsmap={"wp": WP_NS})
    key = etree.SubElement(postmeta, f"{{{WP_NS}}}meta_key")
    key.text = "_translations"
    value = etree.SubElement(postmeta, f"{{{WP_NS}}}meta_value")
    value.text = etree.CDATA(serialize_translations(ids))
    return postmeta
