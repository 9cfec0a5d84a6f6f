
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
Loads a CV document from a local file or a URL and parses its YAML.

This is the only place where a CV can fail: unreadable sources and YAML
syntax errors surface as CVLoadError with a message fit for the user.
"""

import logging
from typing import Any, Dict

import requests
import yaml

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10


class CVLoadError(Exception):
    """Raised when a CV document cannot be read or parsed."""


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_url(url: str, ca_bundle: str | bool = True) -> str:
    """Fetches the raw CV text from a URL."""
    logger.info(f"Fetching CV from: {url}")
    try:
        response = requests.get(url, timeout=REQUEST_TIMEOUT, verify=ca_bundle)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise CVLoadError(f"Failed to load CV from {url}: {e}") from e
    return response.text


def read_file(file_path: str) -> str:
    """Reads the raw CV text from disk."""
    logger.info(f"Reading CV from: {file_path}")
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CVLoadError(f"Failed to read CV file {file_path}: {e}") from e


def read_cv_text(source: str, ca_bundle: str | bool = True) -> str:
    if _is_url(source):
        return read_url(source, ca_bundle=ca_bundle)
    return read_file(source)


def parse_cv_yaml(text: str, source: str = "<string>") -> Dict[str, Any]:
    """
    Parses CV YAML. An empty document yields {}; anything other than a
    mapping at the top level is rejected.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CVLoadError(f"Invalid YAML in {source}: {e}") from e

    if data is None:
        logger.warning(f"CV document {source} is empty")
        return {}
    if not isinstance(data, dict):
        raise CVLoadError(
            f"Invalid CV document {source}: expected a mapping at the top level, "
            f"got {type(data).__name__}"
        )
    if "cv" not in data:
        logger.warning(f"CV document {source} has no top-level 'cv' key")
    return data


def load_cv(source: str, ca_bundle: str | bool = True) -> Dict[str, Any]:
    """Reads and parses a CV document from a path or URL."""
    text = read_cv_text(source, ca_bundle=ca_bundle)
    return parse_cv_yaml(text, source=source)
