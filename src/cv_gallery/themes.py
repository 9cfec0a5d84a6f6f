
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
Catalog of presentation themes.

A theme only decides presentation details (date granularity and how many
items it shows). All data shaping happens in the normaliser.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from cv_gallery.dates import (
    format_date_range,
    format_display_date,
    format_month_full_year,
    format_month_year,
    format_year,
)

logger = logging.getLogger(__name__)

DATE_FORMATTERS: Dict[str, Callable[[Any], str]] = {
    "year": format_year,
    "month_year": format_month_year,
    "month_full_year": format_month_full_year,
    "raw": format_display_date,
}


@dataclass(frozen=True)
class Theme:
    id: str
    name: str
    description: str
    date_style: str = "range"   # "range" or a DATE_FORMATTERS key
    date_separator: str = " – "
    experience_limit: Optional[int] = None
    project_limit: Optional[int] = None

    def format_dates(self, start: Any, end: Any) -> str:
        """Renders a start/end pair under this theme's date policy."""
        if self.date_style == "range":
            return format_date_range(start, end)
        formatter = DATE_FORMATTERS.get(self.date_style, format_display_date)
        parts = [formatter(start), formatter(end)]
        return self.date_separator.join(part for part in parts if part)


THEMES: List[Theme] = [
    Theme(
        id="minimal",
        name="Minimal",
        description="Clean single-page layout with a timeline experience view, projects and contact info.",
        date_style="year",
        experience_limit=5,
        project_limit=4,
    ),
    Theme(
        id="brutalist",
        name="Brutalist",
        description="No-frills, lightweight design. Just content and system fonts.",
        date_style="raw",
    ),
    Theme(
        id="developer-dark",
        name="Developer Dark",
        description="Dark portfolio with full-page sections and numbered headings.",
        date_style="month_full_year",
        date_separator=" — ",
        experience_limit=5,
        project_limit=6,
    ),
    Theme(
        id="spotlight",
        name="Spotlight",
        description="Modern two-column layout with sticky navigation.",
        date_style="range",
    ),
    Theme(
        id="creative-dark",
        name="Creative Dark",
        description="Bold dark theme with horizontal project cards and a clean experience list.",
        date_style="year",
        date_separator=" - ",
        experience_limit=6,
        project_limit=8,
    ),
    Theme(
        id="designer",
        name="Designer",
        description="Minimal portfolio with centred content, monospace dates and project listings.",
        date_style="range",
        experience_limit=8,
        project_limit=10,
    ),
    Theme(
        id="editorial",
        name="Editorial",
        description="Two-column layout with justified text and leader-dot lists.",
        date_style="month_full_year",
        experience_limit=8,
        project_limit=8,
    ),
]


def get_theme(theme_id: Optional[str]) -> Theme:
    """Looks up a theme by id, falling back to the first catalog entry."""
    for theme in THEMES:
        if theme.id == theme_id:
            return theme
    logger.warning(f"Unknown theme '{theme_id}'. Falling back to '{THEMES[0].id}'.")
    return THEMES[0]
