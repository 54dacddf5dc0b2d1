"""Shared test fixtures for localizer tests."""

from pathlib import Path
from xml.sax.saxutils import escape

import pytest
from lxml import etree

from localizer.parsers.wxr_parser import load_wxr

FIXTURES_DIR = Path(__file__).parent / "fixtures"

WXR_HEADER = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
    xmlns:excerpt="http://wordpress.org/export/1.2/excerpt/"
    xmlns:content="http://purl.org/rss/1.0/modules/content/"
    xmlns:wp="http://wordpress.org/export/1.2/">
<channel>
"""
WXR_FOOTER = "</channel>\n</rss>\n"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def sample_doc() -> etree._ElementTree:
    """The sample export: two attachments, two posts and a page."""
    return load_wxr(FIXTURES_DIR / "sample.xml")


@pytest.fixture
def make_item_xml():
    """Factory fixture building the XML of one <item>.

    Usage:
        def test_example(make_item_xml):
            xml = make_item_xml(100, content="<lang_en>Hi</lang_en>")
    """

    def _create_item(
        post_id: int,
        *,
        title: str = "Hello",
        content: str = "",
        excerpt: str = "",
        slug: str = "hello",
        link: str | None = None,
        post_type: str = "post",
        parent: int = 0,
    ) -> str:
        link = link if link is not None else f"http://example.org/{slug}/"
        return f"""<item>
    <title>{escape(title)}</title>
    <link>{link}</link>
    <guid isPermaLink="false">http://example.org/?p={post_id}</guid>
    <content:encoded><![CDATA[{content}]]></content:encoded>
    <excerpt:encoded><![CDATA[{excerpt}]]></excerpt:encoded>
    <wp:post_id>{post_id}</wp:post_id>
    <wp:post_name>{slug}</wp:post_name>
    <wp:post_parent>{parent}</wp:post_parent>
    <wp:post_type>{post_type}</wp:post_type>
</item>
"""

    return _create_item


@pytest.fixture
def make_doc():
    """Factory fixture wrapping item XML into a parsed WXR document."""

    def _create_doc(*items: str) -> etree._ElementTree:
        xml = WXR_HEADER + "".join(items) + WXR_FOOTER
        parser = etree.XMLParser(strip_cdata=False)
        return etree.ElementTree(etree.fromstring(xml.encode("utf-8"), parser))

    return _create_doc
