"""Tests for the built-in document decoders."""

import pytest

from cvparse.decoders import PdfDecoder, PlainTextDecoder, WordDecoder
from cvparse.decoders import pdf_decoder

from conftest import build_docx_bytes


class _FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class _FakePdf:
    def __init__(self, texts):
        self.pages = [_FakePage(t) for t in texts]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class TestPlainTextDecoder:

    def test_utf8(self):
        assert PlainTextDecoder().decode("Résumé\nJane".encode("utf-8")) == "Résumé\nJane"

    def test_bom_is_dropped(self):
        assert PlainTextDecoder().decode(b"\xef\xbb\xbfJANE DOE") == "JANE DOE"

    def test_invalid_bytes_are_replaced(self):
        assert PlainTextDecoder().decode(b"Jane \xff Doe") == "Jane \ufffd Doe"


class TestWordDecoder:

    def test_paragraphs_joined_by_newline(self):
        content = build_docx_bytes(["JANE DOE", "SKILLS", "Python, Go"])
        assert WordDecoder().decode(content) == "JANE DOE\nSKILLS\nPython, Go"

    def test_non_ooxml_falls_back_to_raw_text(self, caplog):
        text = WordDecoder().decode(b"JANE DOE\nSKILLS\nPython, Go")
        assert text == "JANE DOE\nSKILLS\nPython, Go"
        assert "raw text fallback" in caplog.text


class TestPdfDecoder:

    def test_pages_joined_and_cid_stripped(self, monkeypatch):
        opened = []

        def fake_open(stream):
            opened.append(stream.read())
            return _FakePdf(["JANE DOE(cid:3)", None, "SKILLS\nPython"])

        monkeypatch.setattr(pdf_decoder.pdfplumber, "open", fake_open)
        text = PdfDecoder().decode(b"%PDF-1.4 fake")

        assert opened == [b"%PDF-1.4 fake"]
        assert text == "JANE DOE\n\nSKILLS\nPython"

    def test_corrupt_pdf_raises(self, monkeypatch):
        def fake_open(stream):
            raise ValueError("No /Root object!")

        monkeypatch.setattr(pdf_decoder.pdfplumber, "open", fake_open)
        with pytest.raises(ValueError, match="Root"):
            PdfDecoder().decode(b"garbage")
