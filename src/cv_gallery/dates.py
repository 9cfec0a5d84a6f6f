
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
Display formatters for CV dates.

Themes disagree on granularity, so each policy is a separate function. All of
them accept raw YAML values (str, None, and the date/int scalars PyYAML may
produce) and always return a string.
"""

import re
from typing import Any

from cv_gallery.predicates import is_present

MONTHS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
          'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']

PRESENT_LABEL = "Present"
CURRENT_LABEL = "Current"
RANGE_DASH = "–"

_YEAR_PATTERN = re.compile(r"\d{4}")
_LEADING_INT = re.compile(r"\s*(\d+)")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _month_name(segment: str) -> str:
    """Maps a numeric month segment ('03', '3') to 'Mar'; '' when invalid."""
    match = _LEADING_INT.match(segment)
    if not match:
        return ""
    index = int(match.group(1)) - 1
    if 0 <= index < len(MONTHS):
        return MONTHS[index]
    return ""


def _split_date(value: Any) -> tuple[str, str]:
    """Returns the (year, month name) segments of a 'YYYY-MM[-DD]' value."""
    parts = _as_text(value).split("-")
    month = _month_name(parts[1]) if len(parts) > 1 else ""
    return parts[0], month


def format_year(date: Any) -> str:
    """'2021-04' -> '2021'. Falls back to the original text when no year is found."""
    if not date:
        return ""
    if is_present(date):
        return PRESENT_LABEL
    text = _as_text(date)
    match = _YEAR_PATTERN.search(text)
    return match.group(0) if match else text


def format_month_year(date: Any) -> str:
    """'2023-01' -> "Jan '23"; "'23" when the month is missing or invalid."""
    if not date:
        return ""
    if is_present(date):
        return PRESENT_LABEL
    year, month = _split_date(date)
    year = year[-2:]
    if month and year:
        return f"{month} '{year}"
    if year:
        return f"'{year}"
    return _as_text(date)


def format_month_full_year(date: Any) -> str:
    """'2023-01' -> 'Jan 2023'; just the year when the month is unusable."""
    if not date:
        return ""
    if is_present(date):
        return PRESENT_LABEL
    year, month = _split_date(date)
    if month and year:
        return f"{month} {year}"
    return year or _as_text(date)


def format_display_date(date: Any) -> str:
    """The raw value as text, with 'present' capitalised."""
    if not date:
        return ""
    if is_present(date):
        return PRESENT_LABEL
    return _as_text(date)


def _short_year(date: Any) -> str:
    if not date:
        return ""
    if is_present(date):
        return CURRENT_LABEL
    text = _as_text(date)
    return text.split("-")[0][-2:] or text


def format_date_range(start: Any, end: Any) -> str:
    """
    Compact year range: "'20–'23", "'20" for a single year, or "Current" for
    an open-ended period.
    """
    start_year = _short_year(start)
    end_year = _short_year(end)

    if not start_year and not end_year:
        return ""
    if CURRENT_LABEL in (start_year, end_year):
        return CURRENT_LABEL
    if not start_year:
        return f"'{end_year}"
    if not end_year or start_year == end_year:
        return f"'{start_year}"
    return f"'{start_year}{RANGE_DASH}'{end_year}"
