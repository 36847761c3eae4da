from __future__ import annotations

import re

NOTE_SUFFIX = ".md"

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")


def slugify(title: str) -> str:
    """Map a free-text title to a filesystem-safe slug.

    Lower-cases and trims the title, drops anything outside ``[a-z0-9]``,
    whitespace and ``-``, then turns each whitespace run into one hyphen.
    Distinct titles may share a slug; the empty title gives the empty slug.
    """
    base = _DISALLOWED.sub("", title.lower().strip())
    return _WHITESPACE_RUN.sub("-", base)


def note_filename(slug: str) -> str:
    return f"{slug}{NOTE_SUFFIX}"


def title_from_slug(slug: str) -> str:
    """Approximate a display title; casing and punctuation are not restored."""
    return slug.replace("-", " ")
