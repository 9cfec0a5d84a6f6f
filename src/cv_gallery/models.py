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
Data models for the CV Gallery application.

Raw CV entries stay as the plain dicts produced by the YAML parser; only the
derived, theme-facing records are modelled here.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

RawEntry = Dict[str, Any]


@dataclass
class Position:
    """One role inside a multi-position experience entry."""
    title: Optional[str] = None
    start_date: Any = None
    end_date: Any = None
    highlights: Optional[List[str]] = None
    summary: Optional[str] = None


@dataclass
class SingleRole:
    """An experience entry carrying its position directly."""
    company: Optional[str]
    position: Optional[str] = None
    start_date: Any = None
    end_date: Any = None
    highlights: Optional[List[str]] = None
    summary: Optional[str] = None
    location: Optional[str] = None
    url: Optional[str] = None


@dataclass
class MultiRole:
    """An experience entry grouping several positions under one company."""
    company: Optional[str]
    positions: List[Position]
    position: Optional[str] = None  # parent title, used when a position has none
    start_date: Any = None
    end_date: Any = None
    highlights: Optional[List[str]] = None
    location: Optional[str] = None
    url: Optional[str] = None


ExperienceEntry = Union[SingleRole, MultiRole]


@dataclass
class FlattenedPosition:
    """A single role on the experience timeline."""
    company: str
    title: str
    start_date: Optional[str]
    end_date: Optional[str]
    is_current: bool
    highlights: List[str] = field(default_factory=list)
    summary: Optional[str] = None
    location: Optional[str] = None
    url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "company": self.company,
            "title": self.title,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "isCurrent": self.is_current,
            "highlights": list(self.highlights),
            "summary": self.summary,
            "location": self.location,
            "url": self.url,
        }


@dataclass
class SocialLinks:
    """Canonical social slots. Every slot is optional."""
    github: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    youtube: Optional[str] = None
    website: Optional[str] = None
    email: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "github": self.github,
            "linkedin": self.linkedin,
            "twitter": self.twitter,
            "youtube": self.youtube,
            "website": self.website,
            "email": self.email,
        }


@dataclass
class NormalizedCV:
    """
    Canonical CV record handed to every theme.
    Hidden sections keep their key with an empty value so consumers never
    need existence checks.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    about: str = ""
    social_links: SocialLinks = field(default_factory=SocialLinks)
    social_raw: List[RawEntry] = field(default_factory=list)
    current_job_title: Optional[str] = None
    experience: List[FlattenedPosition] = field(default_factory=list)
    projects: List[RawEntry] = field(default_factory=list)
    education: List[RawEntry] = field(default_factory=list)
    awards: List[RawEntry] = field(default_factory=list)
    publications: List[RawEntry] = field(default_factory=list)
    presentations: List[RawEntry] = field(default_factory=list)
    certifications: List[RawEntry] = field(default_factory=list)
    professional_development: List[RawEntry] = field(default_factory=list)
    volunteer: List[FlattenedPosition] = field(default_factory=list)
    skills: List[Any] = field(default_factory=list)
    languages: List[Any] = field(default_factory=list)
    sections_raw: Dict[str, Any] = field(default_factory=dict)
    excluded_sections: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise using the key names themes consume."""
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "website": self.website,
            "about": self.about,
            "socialLinks": self.social_links.to_dict(),
            "socialRaw": list(self.social_raw),
            "currentJobTitle": self.current_job_title,
            "experience": [item.to_dict() for item in self.experience],
            "projects": list(self.projects),
            "education": list(self.education),
            "awards": list(self.awards),
            "publications": list(self.publications),
            "presentations": list(self.presentations),
            "certifications": list(self.certifications),
            "professionalDevelopment": list(self.professional_development),
            "volunteer": [item.to_dict() for item in self.volunteer],
            "skills": list(self.skills),
            "languages": list(self.languages),
            "sectionsRaw": self.sections_raw,
            "excludedSections": list(self.excluded_sections),
        }
