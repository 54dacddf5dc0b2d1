"""WXR writer for migrated documents."""

from pathlib import Path

from lxml import etree


def save_wxr(doc: etree._ElementTree, output_file: Path) -> Path:
    """Write a WXR document as UTF-8.

    Args:
        doc: The document to write
        output_file: Destination path

    Returns:
        Path to the saved file
    """
    output_file.parent.mkdir(parents=True, exist_ok=True)
    doc.write(
        str(output_file),
        encoding="UTF-8",
        xml_declaration=True,
        pretty_print=True,
    )
    return output_file
