"""
Exceptions raised while building the offline data package.

Steady-state client operations never raise; they degrade to sentinel
values. Only construction-time problems surface as exceptions.
"""

from pathlib import Path
from typing import Optional


class DataPackageError(Exception):
    """Base class for offline data package failures."""


class DataPackageLoadError(DataPackageError):
    """A table file is missing or is not a list of {name, id} records."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load data package table {path}: {reason}")


class DuplicateEntityError(DataPackageError):
    """Two entries of the same kind share a name or an id."""

    def __init__(self, kind: str, key: object, source: Optional[Path] = None):
        self.kind = kind
        self.key = key
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Duplicate {kind} key {key!r}{where}")
