
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
Inline markdown helpers for CV text (summaries, highlights, about).
"""

import re
from typing import Any

_BOLD = re.compile(r"\*\*(.+?)\*\*")
_ITALIC = re.compile(r"\*(.+?)\*")
_CODE = re.compile(r"`(.+?)`")
_LINK = re.compile(r"\[(.+?)\]\(.+?\)")
_LEFTOVER = re.compile(r"[*_`]")

# values under these keys are links or contact details, never markup
NON_TEXT_KEYS = frozenset({
    "url", "email", "website", "phone",
    "github", "linkedin", "twitter", "youtube",
})


def strip_markdown(text: Any) -> Any:
    """
    Removes **bold**, *italic*, `code` and [link](url) markup, keeping the text.
    Non-string values are returned unchanged.
    """
    if not text or not isinstance(text, str):
        return text
    text = _BOLD.sub(r"\1", text)
    text = _ITALIC.sub(r"\1", text)
    text = _CODE.sub(r"\1", text)
    text = _LINK.sub(r"\1", text)
    return _LEFTOVER.sub("", text)


def normalize_markdown_in_object(obj: Any) -> Any:
    """
    Applies strip_markdown to every string inside nested dicts and lists,
    leaving values under NON_TEXT_KEYS untouched.
    """
    if isinstance(obj, str):
        return strip_markdown(obj)
    if isinstance(obj, list):
        return [normalize_markdown_in_object(item) for item in obj]
    if isinstance(obj, dict):
        return {key: value if key in NON_TEXT_KEYS else normalize_markdown_in_object(value)
                for key, value in obj.items()}
    return obj
