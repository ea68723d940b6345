import sys
import unittest
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.schemas.cv import ContactInfo, CVData  # noqa: E402
from app.services.analysis_service import score_cv  # noqa: E402
from app.services.cv_text import render_cv_text  # noqa: E402

CV_PAYLOAD = {
    "contactInfo": {
        "fullName": "Jane Doe",
        "email": "jane@example.com",
        "phone": "+1 555 123 4567",
        "address": "Berlin, Germany",
        "linkedin": "linkedin.com/in/janedoe",
    },
    "summary": "Backend developer focused on reliable APIs.",
    "workExperience": [
        {
            "id": "w1",
            "company": "Acme Technologies",
            "position": "Senior Developer",
            "startDate": "2019",
            "endDate": "",
            "current": True,
            "description": "Built and optimized Python services, improving latency by 30%.",
        }
    ],
    "education": [
        {
            "id": "e1",
            "institution": "Technical University",
            "degree": "Bachelor",
            "field": "Computer Science",
            "startDate": "2014",
            "endDate": "2018",
        }
    ],
    "skills": ["Python", "Docker", "PostgreSQL"],
    "projects": [
        {
            "id": "p1",
            "title": "Tracker",
            "description": "Issue tracker",
            "technologies": ["React", "GraphQL"],
        }
    ],
    "certifications": [],
}


class CVDataModelTests(unittest.TestCase):
    def test_accepts_builder_camel_case_payload(self):
        cv = CVData.model_validate(CV_PAYLOAD)

        self.assertEqual(cv.contact_info.full_name, "Jane Doe")
        self.assertTrue(cv.work_experience[0].current)
        self.assertEqual(cv.education[0].field, "Computer Science")

    def test_rejects_invalid_email(self):
        payload = {**CV_PAYLOAD, "contactInfo": {**CV_PAYLOAD["contactInfo"], "email": "not-an-email"}}

        with self.assertRaises(ValidationError) as ctx:
            CVData.model_validate(payload)
        self.assertEqual([error["loc"][-1] for error in ctx.exception.errors()], ["email"])

    def test_rejects_malformed_addresses(self):
        for email in ("a@b.c", "a..b@example.com", ".a@example.com", "jane@example"):
            with self.subTest(email=email):
                with self.assertRaises(ValidationError):
                    ContactInfo(full_name="Jane", email=email, phone="123", address="Berlin")

    def test_top_level_domain_must_be_letters(self):
        with self.assertRaises(ValidationError) as ctx:
            ContactInfo(full_name="Jane", email="jane@example.a1b", phone="123", address="Berlin")
        self.assertIn("Please enter a valid email address", str(ctx.exception))

    def test_rejects_short_summary(self):
        with self.assertRaises(ValidationError) as ctx:
            CVData.model_validate({**CV_PAYLOAD, "summary": "short"})
        self.assertIn("Summary must be at least 10 characters", str(ctx.exception))

    def test_project_needs_a_technology(self):
        project = {**CV_PAYLOAD["projects"][0], "technologies": []}

        with self.assertRaises(ValidationError) as ctx:
            CVData.model_validate({**CV_PAYLOAD, "projects": [project]})
        self.assertIn("At least one technology is required", str(ctx.exception))


class RenderCVTextTests(unittest.TestCase):
    def test_sections_render_in_order_and_skip_empty_ones(self):
        text = render_cv_text(CVData.model_validate(CV_PAYLOAD))

        headers = ["CONTACT INFORMATION", "SUMMARY", "WORK EXPERIENCE", "EDUCATION", "SKILLS", "PROJECTS"]
        positions = [text.index(header) for header in headers]
        self.assertEqual(positions, sorted(positions))
        self.assertNotIn("CERTIFICATIONS", text)
        self.assertIn("Senior Developer at Acme Technologies\n2019 - Present\n", text)
        self.assertIn("Bachelor in Computer Science\nTechnical University\n2014 - 2018\n", text)
        self.assertIn("SKILLS\nPython, Docker, PostgreSQL\n", text)
        self.assertIn("Technologies: React, GraphQL\n", text)

    def test_optional_contact_lines_are_omitted(self):
        payload = {**CV_PAYLOAD, "contactInfo": {**CV_PAYLOAD["contactInfo"], "linkedin": ""}}

        text = render_cv_text(CVData.model_validate(payload))

        self.assertTrue(text.startswith("CONTACT INFORMATION\nJane Doe\njane@example.com\n+1 555 123 4567\nBerlin, Germany\n\nSUMMARY\n"))

    def test_score_cv_uses_rendered_text(self):
        response = score_cv(CVData.model_validate(CV_PAYLOAD))

        self.assertEqual(response.ats_score, response.analysis.score)
        self.assertTrue(response.analysis.sections.contact)
        self.assertTrue(response.analysis.sections.education)
        self.assertTrue(response.cv_text.startswith("CONTACT INFORMATION\n"))


if __name__ == "__main__":
    unittest.main()
