"""Tests for record assembly."""

from cvparse.assembler import assemble, with_ids
from cvparse.shared import (
    CertificationEntry,
    EducationEntry,
    PersonalInfo,
    SkillEntry,
    WorkExperienceEntry,
)


class TestAssemble:

    def test_summary_is_attached_to_personal_info(self):
        record = assemble(PersonalInfo(full_name="JANE DOE"), "Builds backend services")
        assert record.personal_info.full_name == "JANE DOE"
        assert record.personal_info.professional_summary == "Builds backend services"

    def test_empty_collections(self):
        record = assemble(PersonalInfo(), "Professional seeking new opportunities")
        assert record.education == []
        assert record.work_experience == []
        assert record.skills == []
        assert record.certifications == []
        assert record.projects == []

    def test_multi_valued_entries_get_ids(self):
        record = assemble(
            PersonalInfo(),
            "summary",
            education=[EducationEntry(degree="BSc"), EducationEntry(degree="MSc")],
            work_experience=[WorkExperienceEntry(position="Engineer")],
            certifications=[CertificationEntry(name="CCNA Routing")],
            skills=[SkillEntry("Python")],
        )
        assert [e.id.split("_")[:2] for e in record.education] == [["edu", "0"], ["edu", "1"]]
        assert record.work_experience[0].id.startswith("work_0_")
        assert record.certifications[0].id.startswith("cert_0_")
        assert record.skills == [SkillEntry("Python")]

    def test_ids_are_unique_within_a_record(self):
        same = EducationEntry(degree="BSc")
        ids = [e.id for e in with_ids([same, same, same])]
        assert len(set(ids)) == 3

    def test_inputs_are_not_mutated(self):
        entries = [EducationEntry(degree="BSc")]
        with_ids(entries)
        assert entries[0].id == ""
