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

"""
Handles the export of resumes and cover letters to MS Word (DOCX).
"""

import logging
from datetime import datetime

from docx import Document
from docx.enum.text import WD_PARAGRAPH_ALIGNMENT
from docx.shared import Pt, RGBColor

from cvision.models import FontSize, ResumeData, TemplateSettings

logger = logging.getLogger(__name__)

FONT_SIZES = {
    FontSize.SMALL: Pt(10),
    FontSize.MEDIUM: Pt(11),
    FontSize.LARGE: Pt(12),
}


def _join(*parts, sep=" | ") -> str:
    return sep.join(p for p in parts if p)


class ResumeDocxExporter:
    """
    Generates a styled DOCX resume from ResumeData.
    Font family, font size and the primary colour come from TemplateSettings;
    the layout is the same for every template.
    """
    def __init__(self, settings: TemplateSettings = None):
        self.settings = settings or TemplateSettings()
        self.styles = {
            'h1': 'Heading 2',
            'body': 'Normal',
            'bullet': 'List Bullet',
        }

    def _new_document(self):
        document = Document()
        self._setup_styles(document)
        return document

    def _setup_styles(self, document):
        font = document.styles['Normal'].font
        font.name = self.settings.font_family
        font.size = FONT_SIZES.get(self.settings.font_size, Pt(11))

        color = (self.settings.primary_color or "").lstrip("#")
        try:
            document.styles[self.styles['h1']].font.color.rgb = RGBColor.from_string(color.upper())
        except (ValueError, KeyError) as e:
            logger.warning(f"Ignoring primary colour '{self.settings.primary_color}': {e}")

    def _add_header(self, document, resume: ResumeData):
        info = resume.personal_info

        p = document.add_paragraph()
        p.alignment = WD_PARAGRAPH_ALIGNMENT.CENTER
        name = p.add_run(info.full_name)
        name.bold = True
        name.font.size = Pt(24)

        contact = _join(info.email, info.phone, info.location)
        if contact:
            p = document.add_paragraph(contact)
            p.alignment = WD_PARAGRAPH_ALIGNMENT.CENTER

        links = _join(info.linkedin, info.website)
        if links:
            p = document.add_paragraph(links)
            p.alignment = WD_PARAGRAPH_ALIGNMENT.CENTER

    def _add_heading(self, document, title: str):
        p = document.add_paragraph(title, style=self.styles['h1'])
        p.paragraph_format.keep_with_next = True
        return p

    def _add_bullet(self, document, text: str):
        p = document.add_paragraph(text, style=self.styles['bullet'])
        p.paragraph_format.widow_control = True
        return p

    def generate(self, resume: ResumeData, output_filename: str):
        """
        Main entry point to generate the document.

        Args:
            resume (ResumeData): The structured resume.
            output_filename (str): The path to save the generated DOCX.
        """
        document = self._new_document()
        self._add_header(document, resume)

        # --- SUMMARY ---
        if resume.personal_info.summary:
            self._add_heading(document, 'PROFESSIONAL SUMMARY')
            document.add_paragraph(resume.personal_info.summary)

        # --- EXPERIENCE ---
        if resume.experiences:
            self._add_heading(document, 'WORK EXPERIENCE')
            for exp in resume.experiences:
                p = document.add_paragraph()
                p.add_run(exp.position).bold = True
                if exp.company:
                    p.add_run(f" | {exp.company}")
                p.paragraph_format.keep_with_next = True

                end = 'Present' if exp.current else exp.end_date
                dates = _join(exp.start_date, end, sep=" - ")
                if dates:
                    p = document.add_paragraph()
                    p.add_run(dates).italic = True
                    p.paragraph_format.keep_with_next = True

                if exp.description:
                    p = document.add_paragraph(exp.description)
                    p.paragraph_format.widow_control = True

                for achievement in exp.achievements:
                    if achievement.strip():
                        self._add_bullet(document, achievement)

        # --- EDUCATION ---
        if resume.education:
            self._add_heading(document, 'EDUCATION')
            for edu in resume.education:
                p = document.add_paragraph()
                p.add_run(edu.degree).bold = True
                if edu.field:
                    p.add_run(f" in {edu.field}")
                p.paragraph_format.keep_with_next = True

                p = document.add_paragraph(edu.institution)
                dates = _join(edu.start_date, edu.end_date, sep=" - ")
                if dates:
                    p.add_run(f" | {dates}").italic = True
                if edu.gpa:
                    p.add_run(f" | GPA: {edu.gpa}")

                for achievement in edu.achievements:
                    if achievement.strip():
                        self._add_bullet(document, achievement)

        # --- SKILLS ---
        if resume.skills:
            self._add_heading(document, 'SKILLS')
            document.add_paragraph(" • ".join(s.name for s in resume.skills))

        # --- PROJECTS ---
        if resume.projects:
            self._add_heading(document, 'PROJECTS')
            for project in resume.projects:
                p = document.add_paragraph()
                p.add_run(project.name).bold = True
                if project.technologies:
                    p.add_run(f" ({', '.join(project.technologies)})")
                p.paragraph_format.keep_with_next = True

                if project.description:
                    document.add_paragraph(project.description)
                if project.link:
                    document.add_paragraph().add_run(project.link).italic = True
                for highlight in project.highlights:
                    if highlight.strip():
                        self._add_bullet(document, highlight)

        # --- CERTIFICATIONS ---
        if resume.certifications:
            self._add_heading(document, 'CERTIFICATIONS')
            for cert in resume.certifications:
                p = document.add_paragraph()
                p.add_run(cert.name).bold = True
                p.add_run(f" - {cert.issuer} ({cert.date})")
                if cert.credential_id:
                    p.add_run(f" | Credential ID: {cert.credential_id}")
                p.paragraph_format.widow_control = True

        document.save(output_filename)
        logger.info(f"Resume exported: {output_filename}")

    def generate_cover_letter(self, resume: ResumeData, letter_body: str, output_filename: str):
        """
        Generates a cover letter DOCX with the same header as the resume.
        """
        document = self._new_document()
        self._add_header(document, resume)
        document.add_paragraph()  # Spacer

        document.add_paragraph(datetime.now().strftime("%B %d, %Y"))
        document.add_paragraph()

        # The letter normally carries its own salutation and sign-off
        for paragraph in letter_body.split('\n'):
            if paragraph.strip():
                document.add_paragraph(paragraph.strip())

        if "sincerely" not in letter_body.lower():
            document.add_paragraph()
            document.add_paragraph("Sincerely,")
            document.add_paragraph(resume.personal_info.full_name)

        document.save(output_filename)
        logger.info(f"Cover letter exported: {output_filename}")
