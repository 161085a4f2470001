"""YAML front matter parsing for vault notes.

---
title: Weekly review
tags: [review]
---

# Note body...
"""

from __future__ import annotations

import re
from typing import Any

import yaml

FRONTMATTER_PATTERN = re.compile(r"^---\s*\n(.*?)\n(?:---|\.\.\.)\s*(?:\n|$)", re.DOTALL)


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Return (metadata, body). Invalid or non-mapping YAML leaves the content untouched."""
    if not content or not content.startswith("---"):
        return {}, content

    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return {}, content

    try:
        metadata = yaml.safe_load(match.group(1))
    except yaml.YAMLError:
        return {}, content
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        return {}, content

    return metadata, content[match.end() :]
