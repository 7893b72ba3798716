"""
Low-level DOCX / WordprocessingML helpers.

This module handles direct extraction of text from DOCX files:
- reading the main document XML part
- iterating body paragraphs
- converting Word runs into plain text

It contains no CV-specific logic.
"""

from __future__ import annotations

import io
from typing import Iterator, List
from zipfile import ZipFile

from lxml import etree

XML_PARSER = etree.XMLParser(recover=True, huge_tree=True)

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
DOCX_NS = {"w": W_NS}

DOCUMENT_PART = "word/document.xml"


def read_document_xml(content: bytes) -> etree._Element:
    """Parse word/document.xml out of DOCX bytes."""
    with ZipFile(io.BytesIO(content)) as z:
        xml_bytes = z.read(DOCUMENT_PART)
    root = etree.fromstring(xml_bytes, XML_PARSER)
    if root is None:
        raise ValueError(f"{DOCUMENT_PART} is empty")
    return root


def iter_paragraph_texts(content: bytes) -> Iterator[str]:
    """
    Yield the text of every paragraph in the document body, in order.

    Paragraphs inside tables and text boxes are included where Word puts
    them in the body tree. Empty paragraphs are yielded as "".
    """
    root = read_document_xml(content)
    for p in root.iterfind(".//w:body//w:p", DOCX_NS):
        yield extract_text_from_w_p(p)


def extract_text_from_w_p(p: etree._Element) -> str:
    parts: List[str] = []
    for node in p.iter():
        tag = etree.QName(node).localname
        if tag == "t" and node.text:
            parts.append(node.text)
        elif tag in ("noBreakHyphen", "softHyphen"):
            parts.append("-")
        elif tag in ("br", "cr"):
            parts.append("\n")
        elif tag == "tab":
            parts.append("\t")
    return "".join(parts).replace("\u00A0", " ")
