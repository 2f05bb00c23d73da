"""Substring filter over the discovered project list."""

from collections.abc import Sequence

from pl.models import Project


def filter_projects(projects: Sequence[Project], query: str) -> list[Project]:
    """Return the projects whose name contains ``query``, case-insensitively.

    Relative order is preserved. An empty query returns a new list holding
    every project.
    """
    q = query.lower()
    if not q:
        return list(projects)
    return [p for p in projects if q in p.name.lower()]
