"""
Tree entry model.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class Entry:
    """
    Pairing of a relative path and the identifier of a stored object.
    
    Attributes:
        path: path **relative** to the working tree, in POSIX form.
        object_id: hex identifier of the stored object the path names.
    """
    
    path: str
    object_id: str
    
    def __post_init__(self):
        pure = PurePath(os.fspath(self.path))
        if pure.is_absolute():
            raise ValueError("Entry's path must be a relative path")
        if not pure.parts:
            raise ValueError("Entry's path must not be empty")
        object.__setattr__(self, 'path', pure.as_posix())
    
    @property
    def name(self) -> str:
        """Last component of the entry's path."""
        return PurePath(self.path).name
