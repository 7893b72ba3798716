"""Tests for the decoder registry."""

import pytest

from cvparse.decoders import (
    DocumentDecoder,
    PdfDecoder,
    PlainTextDecoder,
    WordDecoder,
    get_decoder,
    is_supported,
    list_decoders,
    normalize_mime_type,
    register_decoder,
    unregister_decoder,
)
from cvparse.vocabulary import MIME_DOC, MIME_DOCX, MIME_PDF, MIME_TEXT


class _UpperDecoder(DocumentDecoder):
    """Test decoder that upper-cases text."""

    def decode(self, content):
        return content.decode("utf-8").upper()


@pytest.fixture
def custom_mime():
    mime = "application/x-test-cv"
    yield mime
    unregister_decoder(mime)


class TestDecoderRegistry:

    @pytest.mark.parametrize(
        "mime,cls",
        [
            (MIME_PDF, PdfDecoder),
            (MIME_TEXT, PlainTextDecoder),
            (MIME_DOC, WordDecoder),
            (MIME_DOCX, WordDecoder),
        ],
    )
    def test_built_in_decoders(self, mime, cls):
        assert isinstance(get_decoder(mime), cls)
        assert is_supported(mime)

    def test_lookup_ignores_case_and_parameters(self):
        assert normalize_mime_type(" Text/Plain; charset=UTF-8 ") == "text/plain"
        assert isinstance(get_decoder("TEXT/PLAIN; charset=utf-8"), PlainTextDecoder)

    def test_unknown_type(self):
        assert get_decoder("image/png") is None
        assert not is_supported("image/png")
        assert get_decoder("") is None

    def test_list_decoders(self):
        decoders = list_decoders()
        assert [d["mime_type"] for d in decoders] == sorted(d["mime_type"] for d in decoders)
        by_mime = {d["mime_type"]: d for d in decoders}
        assert by_mime[MIME_PDF]["name"] == "PdfDecoder"
        assert by_mime[MIME_PDF]["description"] == "Extracts text from PDF documents with pdfplumber."

    def test_register_and_unregister(self, custom_mime):
        register_decoder(custom_mime, _UpperDecoder)
        assert get_decoder(custom_mime).decode(b"jane") == "JANE"
        assert custom_mime in [d["mime_type"] for d in list_decoders()]

        unregister_decoder(custom_mime)
        assert get_decoder(custom_mime) is None

    def test_unregister_unknown_is_noop(self):
        unregister_decoder("application/x-never-registered")
