"""String similarity and skill matching helpers for the Matcher."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_SKILL_ALIASES: dict[str, str] = {
    "js": "javascript",
    "ts": "typescript",
    "python3": "python",
    "golang": "go",
    "nodejs": "node.js",
    "node js": "node.js",
    "reactjs": "react",
    "react.js": "react",
    "react js": "react",
    "nextjs": "next.js",
    "next js": "next.js",
    "html5": "html",
    "css3": "css",
    "mongo db": "mongodb",
    "postgres": "postgresql",
    "k8s": "kubernetes",
}


def normalize_skill(skill: str) -> str:
    """Normalize a skill string for comparison.

    Lowercases, collapses inner whitespace and trims surrounding punctuation
    while keeping characters that carry meaning ("C++", "C#", "Node.js").
    """
    value = re.sub(r"\s+", " ", skill.strip().lower())
    return value.strip(" ,;")


def canonical_skill(skill: str, aliases: bool = True) -> str:
    """Normalize a skill and, optionally, map it onto its canonical alias."""
    normalized = normalize_skill(skill)
    if not aliases:
        return normalized
    return _SKILL_ALIASES.get(normalized, normalized)


def levenshtein_distance(a: str, b: str) -> int:
    """Return the edit distance between two strings.

    Classic dynamic programme over two rows: O(len(a) * len(b)) time and
    O(min(len(a), len(b))) memory.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    current[j - 1] + 1,
                    previous[j] + 1,
                    previous[j - 1] + cost,
                )
            )
        previous = current
    return previous[-1]


def string_similarity(a: str, b: str) -> float:
    """Normalized edit similarity: ``1 - lev(a, b) / max(len(a), len(b))``.

    Two empty strings are identical (1.0).
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


@dataclass
class SkillComparison:
    """How a job's required skills line up against a candidate's skills."""

    exact: list[str] = field(default_factory=list)
    fuzzy: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.exact) + len(self.fuzzy) + len(self.missing)


def compare_skills(
    required: list[str],
    available: list[str],
    threshold: float = 0.7,
    aliases: bool = True,
) -> SkillComparison:
    """Classify each required skill as an exact, fuzzy or missing match.

    Required skills are de-duplicated on their canonical form and reported in
    their original spelling. A skill is fuzzy when it has no exact match but
    some candidate skill has similarity strictly above ``threshold``.
    """
    candidate = {canonical_skill(s, aliases) for s in available}
    comparison = SkillComparison()
    seen: set[str] = set()

    for requirement in required:
        key = canonical_skill(requirement, aliases)
        if not key or key in seen:
            continue
        seen.add(key)

        if key in candidate:
            comparison.exact.append(requirement)
        elif any(string_similarity(key, skill) > threshold for skill in candidate):
            comparison.fuzzy.append(requirement)
        else:
            comparison.missing.append(requirement)

    return comparison


def text_contains_either(a: str, b: str) -> bool:
    """Case-insensitive containment in either direction (blank never matches)."""
    left = a.strip().lower()
    right = b.strip().lower()
    if not left or not right:
        return False
    return left in right or right in left
