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
Renders a NormalizedCV to DOCX using a theme's presentation choices.
"""

import logging
from typing import Any, List, Optional

from docx import Document
from docx.shared import Pt

from cv_gallery.dates import format_year
from cv_gallery.markdown import strip_markdown
from cv_gallery.models import FlattenedPosition, NormalizedCV
from cv_gallery.themes import Theme, get_theme

logger = logging.getLogger(__name__)

TITLE_KEYS = ("name", "title", "label", "language", "position", "degree", "institution")
DETAIL_KEYS = ("summary", "description", "details", "fluency", "issuer",
               "journal", "event", "organization", "area", "location")
DATE_KEYS = ("date", "end_date", "start_date")


def _first(entry: dict, keys) -> str:
    for key in keys:
        value = entry.get(key)
        if value:
            return value if isinstance(value, str) else str(value)
    return ""


def _limited(items: List[Any], limit: Optional[int]) -> List[Any]:
    return items[:limit] if limit else items


class CVGenerator:
    """
    Generates a DOCX resume from a NormalizedCV.
    """
    def __init__(self, theme: Optional[Theme] = None):
        self.theme = theme or get_theme(None)
        self.styles = {
            'title': 'Title',
            'h1': 'Heading 1',
            'body': 'Normal',
            'bullet': 'List Bullet'
        }
        self.document = Document()
        self._setup_styles()

    def _setup_styles(self):
        style = self.document.styles['Normal']
        font = style.font
        font.name = 'Calibri'
        font.size = Pt(11)

    def _heading(self, text: str):
        p = self.document.add_paragraph(text, style=self.styles['h1'])
        p.paragraph_format.keep_with_next = True
        return p

    def _contact_line(self, cv: NormalizedCV) -> str:
        links = cv.social_links
        parts = [cv.location, cv.phone, links.email or cv.email, cv.website,
                 links.github, links.linkedin, links.twitter, links.youtube]
        if links.website and links.website != cv.website:
            parts.append(links.website)
        return " | ".join(part for part in parts if part)

    def _add_positions(self, positions: List[FlattenedPosition]):
        for job in positions:
            self.document.add_paragraph()  # Spacer

            p = self.document.add_paragraph()
            p.add_run(job.company.upper()).bold = True
            if job.location:
                p.add_run(f" | {job.location}")
            dates = self.theme.format_dates(job.start_date, job.end_date)
            if dates:
                p.add_run(" | ")
                p.add_run(dates).italic = True
            p.paragraph_format.keep_with_next = True

            if job.title:
                p = self.document.add_paragraph()
                p.add_run(job.title).bold = True
                p.paragraph_format.keep_with_next = True

            if job.summary:
                p = self.document.add_paragraph(strip_markdown(job.summary))
                p.paragraph_format.widow_control = True

            for highlight in job.highlights:
                p = self.document.add_paragraph(strip_markdown(str(highlight)), style=self.styles['bullet'])
                p.paragraph_format.widow_control = True

    def _add_entries(self, entries: List[Any]):
        for entry in entries:
            p = self.document.add_paragraph(style=self.styles['bullet'])
            p.paragraph_format.widow_control = True

            if not isinstance(entry, dict):
                p.add_run(strip_markdown(str(entry)))
                continue

            title = _first(entry, TITLE_KEYS)
            detail = _first(entry, DETAIL_KEYS)
            for key in ("keywords", "details"):
                if entry.get(key) and isinstance(entry[key], list):
                    detail = ", ".join(str(k) for k in entry[key])
                    break
            year = format_year(_first(entry, DATE_KEYS))

            if title:
                p.add_run(strip_markdown(title)).bold = True
            if detail:
                p.add_run(f"{': ' if title else ''}{strip_markdown(detail)}")
            if year:
                p.add_run(f" ({year})").italic = True

    def generate(self, cv: NormalizedCV, output_filename: str):
        """
        Main entry point to generate the document.

        Args:
            cv (NormalizedCV): The normalised CV data.
            output_filename (str): The path to save the generated DOCX.
        """
        theme = self.theme
        logger.info(f"Rendering CV with theme '{theme.name}'")

        self.document.add_paragraph(cv.name or "Your Name", style=self.styles['title'])
        if cv.current_job_title:
            p = self.document.add_paragraph()
            p.add_run(cv.current_job_title).bold = True
        contact = self._contact_line(cv)
        if contact:
            self.document.add_paragraph(contact)

        if cv.about:
            self._heading('ABOUT')
            p = self.document.add_paragraph(strip_markdown(cv.about))
            p.paragraph_format.widow_control = True

        if cv.experience:
            self._heading('PROFESSIONAL EXPERIENCE')
            self._add_positions(_limited(cv.experience, theme.experience_limit))

        if cv.projects:
            self._heading('PROJECTS')
            self._add_entries(_limited(cv.projects, theme.project_limit))

        sections = [
            ('EDUCATION', cv.education),
            ('SKILLS', cv.skills),
            ('LANGUAGES', cv.languages),
            ('AWARDS', cv.awards),
            ('PUBLICATIONS', cv.publications),
            ('PRESENTATIONS', cv.presentations),
            ('CERTIFICATIONS', cv.certifications),
            ('PROFESSIONAL DEVELOPMENT', cv.professional_development),
        ]
        for heading, entries in sections:
            if entries:
                self._heading(heading)
                self._add_entries(entries)

        if cv.volunteer:
            self._heading('VOLUNTEER')
            self._add_positions(cv.volunteer)

        self.document.save(output_filename)
        logger.info(f"Saved CV to: {output_filename}")
