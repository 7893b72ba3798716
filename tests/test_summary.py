"""Tests for summary extraction."""

from cvparse.extractors import extract_summary
from cvparse.vocabulary import FALLBACK_SUMMARY

from conftest import make_doc


class TestExtractSummary:

    def test_lines_are_joined_with_spaces(self, sample_cv_text):
        summary = extract_summary(make_doc(sample_cv_text))
        assert summary == (
            "Backend developer focused on payment systems and reliability. "
            "Enjoys mentoring junior developers and writing clean code."
        )

    def test_short_and_numeric_lines_are_skipped(self):
        text = "SUMMARY\nShort line\n2019 - 2023 - 2024 - 2025\nBuilds reliable backend services for banks"
        assert extract_summary(make_doc(text)) == "Builds reliable backend services for banks"

    def test_at_most_ten_lines(self):
        body = "\n".join(f"Line number {i} of a long personal statement" for i in range(15))
        summary = extract_summary(make_doc("ABOUT ME\n" + body))
        assert "Line number 9 " in summary
        assert "Line number 10 " not in summary

    def test_stops_at_next_section(self):
        text = "PROFILE\nBuilds reliable backend services for banks\nSKILLS\nPython, Go, Rust, and lots more"
        assert extract_summary(make_doc(text)) == "Builds reliable backend services for banks"

    def test_only_first_summary_section_is_used(self):
        text = (
            "SUMMARY\nBuilds reliable backend services for banks\n"
            "SKILLS\nPython, Go\n"
            "OBJECTIVE\nLooking for a senior backend position soon"
        )
        assert extract_summary(make_doc(text)) == "Builds reliable backend services for banks"

    def test_fallback_without_summary_header(self):
        text = "JANE DOE\nSKILLS\nPython, Go"
        assert extract_summary(make_doc(text)) == FALLBACK_SUMMARY
        assert FALLBACK_SUMMARY == "Professional seeking new opportunities"

    def test_fallback_when_section_has_only_short_lines(self):
        assert extract_summary(make_doc("SUMMARY\nHard worker")) == FALLBACK_SUMMARY
