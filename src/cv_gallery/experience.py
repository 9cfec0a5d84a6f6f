
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
Experience timeline: turns raw experience/volunteer entries into a flat list
of positions.

An entry is either a single role (position and dates on the entry itself) or
a company holding several `positions`. Entries are parsed once into
`SingleRole` / `MultiRole` and the flattener only dispatches on that type.
"""

import logging
from typing import Any, List, Optional

from cv_gallery.models import (
    ExperienceEntry,
    FlattenedPosition,
    MultiRole,
    Position,
    SingleRole,
)
from cv_gallery.predicates import is_archived, is_present

logger = logging.getLogger(__name__)


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _parse_position(raw: Any) -> Position:
    if not isinstance(raw, dict):
        return Position()
    return Position(
        title=raw.get("title") or raw.get("position"),
        start_date=raw.get("start_date"),
        end_date=raw.get("end_date"),
        highlights=raw.get("highlights"),
        summary=raw.get("summary") or raw.get("description"),
    )


def parse_experience_entry(raw: dict) -> ExperienceEntry:
    """Classifies a raw entry as a single role or a multi-position company."""
    company = raw.get("company") or raw.get("organization")
    title = raw.get("position") or raw.get("role")
    positions = raw.get("positions")

    if isinstance(positions, list) and positions:
        return MultiRole(
            company=company,
            positions=[_parse_position(p) for p in positions],
            position=title,
            start_date=raw.get("start_date"),
            end_date=raw.get("end_date"),
            highlights=raw.get("highlights"),
            location=raw.get("location"),
            url=raw.get("url"),
        )

    return SingleRole(
        company=company,
        position=title,
        start_date=raw.get("start_date"),
        end_date=raw.get("end_date"),
        highlights=raw.get("highlights"),
        summary=raw.get("summary") or raw.get("description"),
        location=raw.get("location"),
        url=raw.get("url"),
    )


def resolve_title(own: Optional[str], parent: Optional[str]) -> str:
    """Position title, else the parent entry's position. Empty titles fall through."""
    return own or parent or ""


def resolve_date(own: Any, parent: Any) -> Optional[str]:
    """
    Position date, else the parent entry's date.
    Only a missing (None) value falls back; an explicit '' is kept.
    """
    return _text(own if own is not None else parent)


def resolve_highlights(own: Any, parent: Any) -> List[str]:
    """Position highlights, else the parent's. An explicit empty list is kept."""
    for candidate in (own, parent):
        if isinstance(candidate, list):
            return list(candidate)
    return []


def _flatten_entry(entry: ExperienceEntry) -> List[FlattenedPosition]:
    if isinstance(entry, MultiRole):
        records = []
        for position in entry.positions:
            end_date = resolve_date(position.end_date, entry.end_date)
            records.append(FlattenedPosition(
                company=entry.company or "",
                title=resolve_title(position.title, entry.position),
                start_date=resolve_date(position.start_date, entry.start_date),
                end_date=end_date,
                is_current=is_present(end_date),
                highlights=resolve_highlights(position.highlights, entry.highlights),
                summary=position.summary,
                location=entry.location,
                url=entry.url,
            ))
        return records

    end_date = _text(entry.end_date)
    return [FlattenedPosition(
        company=entry.company or "",
        title=entry.position or "",
        start_date=_text(entry.start_date),
        end_date=end_date,
        is_current=is_present(end_date),
        highlights=resolve_highlights(entry.highlights, None),
        summary=entry.summary,
        location=entry.location,
        url=entry.url,
    )]


def flatten_experience(entries: Any, exclude_archived: bool = True,
                       limit: Optional[int] = None) -> List[FlattenedPosition]:
    """
    Flattens experience entries into one record per position, keeping source
    order. `limit` applies to the flattened list, not to entries.
    """
    if not isinstance(entries, list):
        return []

    items: List[FlattenedPosition] = []
    for raw in entries:
        if not raw:
            continue
        if not isinstance(raw, dict):
            logger.debug(f"Skipping non-mapping experience entry: {raw!r}")
            continue
        if exclude_archived and is_archived(raw):
            continue
        items.extend(_flatten_entry(parse_experience_entry(raw)))

    return items[:limit] if limit else items


def get_current_job_title(entries: Any) -> Optional[str]:
    """Title of the first current position, else of the first position."""
    flat = flatten_experience(entries)
    current = next((item for item in flat if item.is_current), None)
    return (current.title if current else "") or (flat[0].title if flat else "") or None
