"""Pseudo-data generator for development fixtures.

Produces organization-style names, lorem ipsum paragraphs and short questions.
Every helper takes a `random.Random`, so a seeded generator gives the same
fixtures on every run.
"""

from __future__ import annotations

import random
from typing import Optional

# ─── Word lists ──────────────────────────────────────────────────────────────

_SURNAMES = [
    "Hartmann", "Keller", "Lindqvist", "Moreau", "Okafor", "Petrov",
    "Quinn", "Rossi", "Sato", "Tanaka", "Vasquez", "Whitfield",
    "Abernathy", "Brandt", "Castillo", "Dubois", "Eriksen", "Fischer",
]

_INDUSTRIES = [
    "Logistics", "Analytics", "Software", "Consulting", "Robotics",
    "Media", "Biotech", "Energy", "Systems", "Dynamics", "Labs",
]

_SUFFIXES = ["Inc", "LLC", "Group", "and Sons", "Partners", "Ltd", "Co"]

_LOREM_WORDS = [
    "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing",
    "elit", "sed", "do", "eiusmod", "tempor", "incididunt", "ut", "labore",
    "et", "dolore", "magna", "aliqua", "enim", "ad", "minim", "veniam",
    "quis", "nostrud", "exercitation", "ullamco", "laboris", "nisi",
    "aliquip", "ex", "ea", "commodo", "consequat", "duis", "aute", "irure",
    "in", "reprehenderit", "voluptate", "velit", "esse", "cillum",
    "fugiat", "nulla", "pariatur", "excepteur", "sint", "occaecat",
]

_QUESTION_STARTS = [
    "What is the difference between",
    "How should we handle",
    "Why does the team prefer",
    "When is it worth introducing",
    "Can someone explain",
]

_QUESTION_TOPICS = [
    "unit tests and integration tests",
    "database migrations in production",
    "async request handlers",
    "connection pooling",
    "feature flags",
    "schema validation",
]


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def company_name(rng: Optional[random.Random] = None) -> str:
    """Return a short organization-style label, e.g. "Keller Robotics Group"."""
    r = _rng(rng)
    pattern = r.randrange(3)
    if pattern == 0:
        return f"{r.choice(_SURNAMES)} {r.choice(_INDUSTRIES)} {r.choice(_SUFFIXES)}"
    if pattern == 1:
        first, second = r.sample(_SURNAMES, 2)
        return f"{first}, {second} and {r.choice(_SURNAMES)}"
    return f"{r.choice(_SURNAMES)} {r.choice(_SUFFIXES)}"


def _sentence(r: random.Random) -> str:
    words = [r.choice(_LOREM_WORDS) for _ in range(r.randint(6, 14))]
    return " ".join(words).capitalize() + "."


def lorem_paragraph(rng: Optional[random.Random] = None, sentences: int = 4) -> str:
    """Return `sentences` lorem ipsum sentences joined into one paragraph."""
    if sentences < 1:
        raise ValueError("sentences must be >= 1")
    r = _rng(rng)
    return " ".join(_sentence(r) for _ in range(sentences))


def question_text(rng: Optional[random.Random] = None) -> str:
    r = _rng(rng)
    return f"{r.choice(_QUESTION_STARTS)} {r.choice(_QUESTION_TOPICS)}?"


__all__ = ["company_name", "lorem_paragraph", "question_text"]
