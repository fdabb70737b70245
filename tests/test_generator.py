# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
import shutil
import tempfile
import unittest
from unittest.mock import patch, MagicMock

from docx import Document
from docx.shared import Pt, RGBColor

from cvision.generator import ResumeDocxExporter
from cvision.models import (
    Certification,
    Education,
    Experience,
    FontSize,
    PersonalInfo,
    Project,
    ResumeData,
    Skill,
    TemplateSettings,
)


def full_resume():
    return ResumeData(
        personal_info=PersonalInfo(full_name="Jane Doe", email="jane@example.com", phone="555",
                                   location="Lisbon", linkedin="linkedin.com/in/jane",
                                   summary="Backend engineer."),
        experiences=[Experience(id="1", company="Acme", position="Engineer", start_date="2020",
                                current=True, description="Built APIs.",
                                achievements=["Cut latency by 30%", "  "])],
        education=[Education(id="2", institution="Uni", degree="BSc", field="Physics", gpa="3.9")],
        skills=[Skill(name="Python"), Skill(name="Go")],
        projects=[Project(name="cvision", technologies=["Python"], link="https://example.com",
                          highlights=["Used by 100 people"])],
        certifications=[Certification(name="CKA", issuer="CNCF", date="2024", credential_id="X1")],
    )


class TestResumeDocxExporter(unittest.TestCase):

    @patch('cvision.generator.Document')
    def test_generate_adds_sections(self, mock_document_class):
        mock_doc = MagicMock()
        mock_document_class.return_value = mock_doc

        ResumeDocxExporter().generate(full_resume(), "output.docx")

        calls = [args[0] for args, _ in mock_doc.add_paragraph.call_args_list if args]
        for heading in ("PROFESSIONAL SUMMARY", "WORK EXPERIENCE", "EDUCATION",
                        "SKILLS", "PROJECTS", "CERTIFICATIONS"):
            self.assertIn(heading, calls)
        self.assertIn("Python • Go", calls)
        self.assertIn("Cut latency by 30%", calls)
        self.assertNotIn("  ", calls)
        mock_doc.save.assert_called_with("output.docx")

    @patch('cvision.generator.Document')
    def test_empty_sections_are_omitted(self, mock_document_class):
        mock_doc = MagicMock()
        mock_document_class.return_value = mock_doc

        ResumeDocxExporter().generate(ResumeData(), "empty.docx")

        calls = [args[0] for args, _ in mock_doc.add_paragraph.call_args_list if args]
        self.assertNotIn("WORK EXPERIENCE", calls)
        self.assertNotIn("SKILLS", calls)
        mock_doc.save.assert_called_with("empty.docx")

    @patch('cvision.generator.Document')
    def test_bad_colour_is_ignored(self, mock_document_class):
        mock_document_class.return_value = MagicMock()
        exporter = ResumeDocxExporter(TemplateSettings(primary_color="not-a-colour"))
        with self.assertLogs("cvision.generator", level="WARNING"):
            exporter.generate(ResumeData(), "out.docx")


class TestResumeDocxOutput(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_written_document(self):
        path = os.path.join(self.test_dir, "resume.docx")
        settings = TemplateSettings(primary_color="#112233", font_family="Arial", font_size=FontSize.LARGE)
        ResumeDocxExporter(settings).generate(full_resume(), path)

        doc = Document(path)
        texts = [p.text for p in doc.paragraphs]
        self.assertEqual(texts[0], "Jane Doe")
        self.assertIn("jane@example.com | 555 | Lisbon", texts)
        self.assertIn("Engineer | Acme", texts)
        self.assertIn("2020 - Present", texts)
        self.assertIn("BSc in Physics", texts)
        self.assertIn("Uni | GPA: 3.9", texts)
        self.assertIn("CKA - CNCF (2024) | Credential ID: X1", texts)

        normal = doc.styles['Normal'].font
        self.assertEqual(normal.name, "Arial")
        self.assertEqual(normal.size, Pt(12))
        self.assertEqual(doc.styles['Heading 2'].font.color.rgb, RGBColor(0x11, 0x22, 0x33))

    def test_cover_letter_adds_sign_off(self):
        path = os.path.join(self.test_dir, "letter.docx")
        ResumeDocxExporter().generate_cover_letter(full_resume(), "Dear team,\n\nHire me.", path)

        texts = [p.text for p in Document(path).paragraphs]
        self.assertIn("Dear team,", texts)
        self.assertIn("Hire me.", texts)
        self.assertEqual(texts[-2:], ["Sincerely,", "Jane Doe"])

    def test_cover_letter_keeps_own_sign_off(self):
        path = os.path.join(self.test_dir, "letter.docx")
        ResumeDocxExporter().generate_cover_letter(full_resume(), "Hello.\n\nSincerely,\nJane", path)

        texts = [p.text for p in Document(path).paragraphs]
        self.assertEqual(texts[-2:], ["Sincerely,", "Jane"])


if __name__ == '__main__':
    unittest.main()
