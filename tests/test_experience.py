"""Tests for work experience extraction and date ranges."""

import pytest

from cvparse.extractors import DateRange, extract_dates, extract_work_experience

from conftest import make_doc


class TestExtractDates:
    """Tests for extract_dates()."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Jan 2020 - Present", DateRange("Jan 2020", "Present", True)),
            ("Mar 2018 - Dec 2019", DateRange("Mar 2018", "Dec 2019", False)),
            ("September 2015 – June 2017", DateRange("September 2015", "June 2017", False)),
            ("2016 - 2018", DateRange("2016", "2018", False)),
            ("2019 - current", DateRange()),
        ],
    )
    def test_ranges(self, text, expected):
        assert extract_dates(text) == expected

    def test_current_two_year_range_ends_present(self):
        assert extract_dates("2019 - 2021 (ongoing)") == DateRange("2019", "Present", True)

    def test_mixed_form_uses_year_fallback(self):
        assert extract_dates("Jan 2020 - 2022") == DateRange("2020", "2022", False)

    def test_no_dates(self):
        assert extract_dates("Acme Corp") == DateRange()


class TestExtractWorkExperience:
    """Tests for extract_work_experience()."""

    def test_single_job(self, sample_cv_text):
        (work,) = extract_work_experience(make_doc(sample_cv_text))
        assert work.position == "Senior Engineer"
        assert work.company == "Acme Corp"
        assert work.start_date == "Jan 2020"
        assert work.end_date == "Present"
        assert work.is_current is True
        assert work.responsibilities == "Led a team of five engineers\nShipped three major releases"
        assert work.achievements == ""

    def test_job_line_opens_new_entry(self):
        text = (
            "EMPLOYMENT HISTORY\n"
            "Software Engineer Mar 2018 - Dec 2019\n"
            "Safaricom PLC\n"
            "• Built USSD payment flows for mobile users\n"
            "• Short\n"
            "Data Analyst 2016 - 2018\n"
            "KCB Group\n"
            "Achievements: Employee of the year\n"
            "• Automated monthly reporting with Python\n"
        )
        first, second = extract_work_experience(make_doc(text))

        assert first.position == "Software Engineer"
        assert first.company == "Safaricom PLC"
        assert (first.start_date, first.end_date, first.is_current) == ("Mar 2018", "Dec 2019", False)
        assert first.responsibilities == "Built USSD payment flows for mobile users"

        assert second.position == "Data Analyst"
        assert second.company == "KCB Group"
        assert (second.start_date, second.end_date) == ("2016", "2018")
        assert second.achievements == "Employee of the year"
        assert second.responsibilities == "Automated monthly reporting with Python"

    def test_company_only_before_bullets(self):
        text = (
            "EXPERIENCE\n"
            "Consultant Feb 2021 - Present\n"
            "• Advised county governments on data systems\n"
            "Freelance engagements across East Africa\n"
        )
        (work,) = extract_work_experience(make_doc(text))
        assert work.company == ""
        assert work.responsibilities == "Advised county governments on data systems"

    def test_lines_before_first_job_are_ignored(self):
        text = "EXPERIENCE\n• Orphan bullet without a job\nTeacher 2010 - 2012\nAlliance High"
        (work,) = extract_work_experience(make_doc(text))
        assert work.position == "Teacher"
        assert work.company == "Alliance High"
        assert work.responsibilities == ""

    def test_no_section(self):
        assert extract_work_experience(make_doc("JANE DOE\nSKILLS\nPython, Go")) == []
