"""Project discovery: find git checkouts one level below each configured root."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from pl.errors import HomeDirectoryError
from pl.models import Project

logger = logging.getLogger("pl.discovery")

GIT_MARKER = ".git"


def home_dir() -> Path:
    """Return the user's home directory.

    Raises:
        HomeDirectoryError: If the home directory cannot be determined.
    """
    home = os.path.expanduser("~")
    if not home or home == "~":
        raise HomeDirectoryError("could not determine home directory")
    return Path(home)


def parse_dir(proj_dir: str) -> Path:
    """Expand a leading '~' in a configured project directory.

    Only the bare '~' and '~/...' forms are expanded; '~user' and anything
    else is returned unchanged.
    """
    if proj_dir == "~":
        return home_dir()

    if proj_dir.startswith("~/"):
        return home_dir() / proj_dir[2:]

    return Path(proj_dir)


def is_project_dir(path: Path) -> bool:
    """True if ``path`` has a .git entry directly inside it."""
    try:
        return (path / GIT_MARKER).exists()
    except OSError:
        return False


def _scan_root(root: Path) -> list[Project]:
    """List the projects directly under ``root``.

    Unreadable roots yield nothing. If the listing fails partway through,
    the projects found before the error are kept and the rest of that root
    is skipped.
    """
    projects: list[Project] = []
    try:
        with os.scandir(root) as entries:
            for entry in entries:
                path = Path(entry.path)
                if is_project_dir(path):
                    projects.append(Project.from_path(path.absolute()))
    except OSError as e:
        logger.debug("Skipping project root %s: %s", root, e)
    return projects


def discover(roots: Iterable[str]) -> list[Project]:
    """Discover projects under every root, in configured root order.

    Order within a root follows the OS directory listing and is not stable.

    Raises:
        HomeDirectoryError: If a root needs '~' expansion and there is no home.
    """
    projects: list[Project] = []
    for spec in roots:
        root = parse_dir(spec)
        found = _scan_root(root)
        logger.debug("Found %d project(s) under %s", len(found), root)
        projects.extend(found)
    return projects
