"""Tag categories and typo corrections applied to remark tags."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class TagCategory:
    name: str
    variants: Tuple[str, ...]


TAG_CATEGORIES: List[TagCategory] = [
    TagCategory(
        "dev",
        ("feat", "wip", "exp", "chore", "patch", "ui", "data", "db", "seed", "perf", "debug"),
    ),
    TagCategory("devop", ("ci", "deploy")),
]

TYPO_TAGS: Dict[str, str] = {
    "faet": "feat",
    "taem": "team",
    "opeartion": "operation",
    "adocs": "operation",
}


def map_tag(tag: str) -> str:
    """Correct known typos and prefix the tag with its category, if any.

    ``feat`` becomes ``dev:feat``; tags outside every category are returned
    as-is after typo correction.
    """

    tag = TYPO_TAGS.get(tag) or tag
    for category in TAG_CATEGORIES:
        if tag in category.variants:
            return f"{category.name}:{tag}"
    return tag
