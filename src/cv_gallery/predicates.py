
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
Boolean classifiers shared by every CV section.
"""

from typing import Any

PRESENT = "present"
ARCHIVED_TAG = "archived"


def is_present(value: Any) -> bool:
    """True when a date value marks an open-ended ("present") period."""
    return str(value or "").strip().lower() == PRESENT


def is_archived(entry: Any) -> bool:
    """True when the entry is tagged 'archived' (exact, case-sensitive)."""
    if not isinstance(entry, dict):
        return False
    tags = entry.get("tags")
    return isinstance(tags, list) and ARCHIVED_TAG in tags
