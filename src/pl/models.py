"""Data models for pl."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class InputMode(Enum):
    """Which half of the key table is active."""

    NAVIGATION = "navigation"
    EDITING = "editing"


@dataclass(frozen=True)
class Project:
    """Immutable project entry found during discovery."""

    name: str
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> "Project":
        return cls(name=path.name, path=path)
