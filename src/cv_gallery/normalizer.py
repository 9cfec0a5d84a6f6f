
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
Builds the canonical NormalizedCV from a parsed CV document.

Every helper here is pure; the same document and config always produce an
equal result, so callers may cache on the document.
"""

import logging
from typing import Any, Dict, List, Optional

from cv_gallery.config import CVConfig
from cv_gallery.experience import flatten_experience, get_current_job_title
from cv_gallery.models import NormalizedCV, SocialLinks
from cv_gallery.sections import filter_active
from cv_gallery.social import normalize_social_links

logger = logging.getLogger(__name__)

# output field -> raw section keys, first one present wins
FILTERED_SECTIONS = {
    "projects": ("projects",),
    "education": ("education",),
    "awards": ("awards",),
    "publications": ("publications",),
    "presentations": ("presentations",),
    "certifications": ("certifications",),
    "professional_development": ("professional_development", "professionalDevelopment"),
}

# output field -> name used by the exclusion list
SECTION_NAMES = {
    "professional_development": "professionalDevelopment",
}


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _section_list(sections: Dict[str, Any], *keys: str) -> List[Any]:
    for key in keys:
        value = sections.get(key)
        if value is not None:
            return value if isinstance(value, list) else []
    return []


def _text_field(cv: Dict[str, Any], key: str) -> Optional[str]:
    value = cv.get(key)
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def normalize_cv(raw_document: Any, config: Optional[CVConfig] = None) -> NormalizedCV:
    """
    Derives the theme-facing record from a parsed CV document.
    Hidden sections are emitted with empty values rather than omitted.
    """
    config = config or CVConfig()
    visible = config.is_section_visible

    cv = _mapping(_mapping(raw_document).get("cv"))
    sections = _mapping(cv.get("sections"))
    socials = cv.get("social") if isinstance(cv.get("social"), list) else []
    experience_raw = _section_list(sections, "experience")

    about = sections.get("about")
    if not isinstance(about, str) or not visible("about"):
        about = ""

    if visible("socialLinks"):
        social_links = normalize_social_links(socials, cv.get("email"))
        social_raw = list(socials)
    else:
        social_links = SocialLinks()
        social_raw = []

    filtered = {
        field_name: filter_active(_section_list(sections, *keys))
        if visible(SECTION_NAMES.get(field_name, field_name)) else []
        for field_name, keys in FILTERED_SECTIONS.items()
    }

    normalized = NormalizedCV(
        name=_text_field(cv, "name"),
        email=_text_field(cv, "email"),
        phone=_text_field(cv, "phone"),
        location=_text_field(cv, "location"),
        website=_text_field(cv, "website"),
        about=about,
        social_links=social_links,
        social_raw=social_raw,
        current_job_title=get_current_job_title(experience_raw) if visible("experience") else None,
        experience=flatten_experience(experience_raw) if visible("experience") else [],
        volunteer=flatten_experience(_section_list(sections, "volunteer")) if visible("volunteer") else [],
        skills=list(_section_list(sections, "skills")) if visible("skills") else [],
        languages=list(_section_list(sections, "languages")) if visible("languages") else [],
        sections_raw=sections,
        excluded_sections=list(config.excluded_sections),
        **filtered,
    )

    logger.debug(
        f"Normalised CV for {normalized.name!r}: {len(normalized.experience)} positions, "
        f"{len(normalized.projects)} projects, excluded={normalized.excluded_sections}"
    )
    return normalized
