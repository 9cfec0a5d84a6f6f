
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
Runtime configuration for CV Gallery.

Values come from environment variables (see `load_config`) and may be
overridden from the CLI. The normaliser never reads the environment itself;
it is handed a `CVConfig`.

CA bundle resolution for remote CV sources (in priority order):
  1. Explicit override via --ca-bundle CLI arg
  2. REQUESTS_CA_BUNDLE environment variable
  3. CURL_CA_BUNDLE environment variable
  4. SSL_CERT_FILE environment variable
  5. System defaults (True, delegates to certifi / OS trust store)
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from cv_gallery.sections import validate_excluded_sections

logger = logging.getLogger(__name__)

ENV_EXCLUDED_SECTIONS = "CV_GALLERY_EXCLUDED_SECTIONS"
ENV_THEME = "CV_GALLERY_THEME"
ENV_SOURCE = "CV_GALLERY_SOURCE"
ENV_ENVIRONMENT = "CV_GALLERY_ENV"

CA_BUNDLE_VARS = ("REQUESTS_CA_BUNDLE", "CURL_CA_BUNDLE", "SSL_CERT_FILE")

DEFAULT_THEME_ID = "minimal"
DEFAULT_SOURCE = "CV.yaml"
PRODUCTION = "production"


def parse_comma_separated(value: Optional[str]) -> List[str]:
    """'a, b,,c' -> ['a', 'b', 'c']"""
    if not value or not isinstance(value, str):
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def resolve_ca_bundle(override: Optional[str] = None,
                      environ: Optional[Mapping[str, str]] = None) -> str | bool:
    """
    Resolve the CA bundle to use for outbound HTTPS requests.

    Returns:
        str: Path to a CA bundle file, or
        bool: True to use the default system/certifi trust store.
    """
    if override:
        return override

    environ = os.environ if environ is None else environ
    for var in CA_BUNDLE_VARS:
        value = environ.get(var)
        if value:
            logger.debug(f"Using CA bundle from {var}: {value}")
            return value

    return True


@dataclass
class CVConfig:
    """Settings threaded through loading, normalisation and rendering."""
    excluded_sections: List[str] = field(default_factory=list)
    theme_id: str = DEFAULT_THEME_ID
    source: str = DEFAULT_SOURCE
    environment: str = "development"
    ca_bundle: str | bool = True

    def __post_init__(self):
        self.excluded_sections = validate_excluded_sections(
            self.excluded_sections, warn=not self.is_production
        )

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == PRODUCTION

    @property
    def has_excluded_sections(self) -> bool:
        return bool(self.excluded_sections)

    def is_section_visible(self, section: str) -> bool:
        return section not in self.excluded_sections


def load_config(environ: Optional[Mapping[str, str]] = None,
                excluded_sections: Optional[List[str]] = None,
                theme_id: Optional[str] = None,
                source: Optional[str] = None,
                ca_bundle: Optional[str] = None) -> CVConfig:
    """
    Builds a CVConfig from the environment. Keyword arguments (typically CLI
    flags) take precedence over environment values when given.
    """
    environ = os.environ if environ is None else environ

    if excluded_sections is None:
        excluded_sections = parse_comma_separated(environ.get(ENV_EXCLUDED_SECTIONS))

    return CVConfig(
        excluded_sections=excluded_sections,
        theme_id=theme_id or environ.get(ENV_THEME) or DEFAULT_THEME_ID,
        source=source or environ.get(ENV_SOURCE) or DEFAULT_SOURCE,
        environment=environ.get(ENV_ENVIRONMENT) or "development",
        ca_bundle=resolve_ca_bundle(ca_bundle, environ),
    )
