
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
Resolves the free-form `social` list of a CV into named link slots.
"""

from typing import Any, Iterable, List, Optional

from cv_gallery.models import SocialLinks

# slot -> accepted network names (case-insensitive)
SOCIAL_ALIASES = {
    "github": ("github",),
    "linkedin": ("linkedin",),
    "twitter": ("twitter", "x"),
    "youtube": ("youtube",),
    "website": ("website", "personal"),
}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def pick_social_url(socials: Any, alias_names: Iterable[str]) -> Optional[str]:
    """
    Returns the url of the first social whose network matches one of the
    aliases, in list order. None when nothing matches.
    """
    lowered = {name.lower() for name in alias_names}
    for social in _as_list(socials):
        if not isinstance(social, dict):
            continue
        if str(social.get("network") or "").lower() in lowered:
            return social.get("url") or None
    return None


def normalize_social_links(socials: Any, email: Optional[str] = None) -> SocialLinks:
    """Fills every canonical slot; email is passed through untouched."""
    links = {slot: pick_social_url(socials, aliases)
             for slot, aliases in SOCIAL_ALIASES.items()}
    return SocialLinks(email=email or None, **links)
