
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
Section filtering and the closed set of section names that may be hidden.
"""

import logging
from typing import Any, Iterable, List, Optional

from cv_gallery.predicates import is_archived

logger = logging.getLogger(__name__)

VALID_SECTIONS = (
    'about',
    'experience',
    'projects',
    'education',
    'skills',
    'languages',
    'awards',
    'publications',
    'presentations',
    'volunteer',
    'certifications',
    'professionalDevelopment',
    'socialLinks',
)


def filter_active(items: Any, limit: Optional[int] = None) -> List[Any]:
    """Drops empty and archived entries, keeping order."""
    if not isinstance(items, list):
        return []
    filtered = [item for item in items if item and not is_archived(item)]
    return filtered[:limit] if limit else filtered


def validate_excluded_sections(names: Iterable[str], warn: bool = True) -> List[str]:
    """
    Keeps only known section names. Unknown names are ignored; with `warn`
    set they are reported, otherwise only logged at debug level.
    """
    valid: List[str] = []
    invalid: List[str] = []
    for name in names or ():
        if name in VALID_SECTIONS:
            if name not in valid:
                valid.append(name)
        else:
            invalid.append(name)

    if invalid:
        message = (f"Invalid section names in excluded sections: {', '.join(map(str, invalid))}. "
                   f"Valid sections: {', '.join(VALID_SECTIONS)}")
        if warn:
            logger.warning(message)
        else:
            logger.debug(message)

    return valid
