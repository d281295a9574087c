"""
Tree object model.

Trees record a directory snapshot: each entry names a file and the
identifier of the blob holding its contents.
"""

from typing import Iterable, List, Optional

from ..errors import SerializationError
from ..integrity.canonical import encode_path, encode_tree_entry
from .base import ObjectKind, StorableObject
from .entry import Entry

# Only regular, non-executable files are represented.
REGULAR_FILE_MODE = '100644'


class Tree(StorableObject):
    """
    Composite object referencing named children.
    
    The encoding depends only on the set of (path, object_id) pairs:
    entries are sorted by the bytes of their path before encoding, so the
    order in which they were added never changes the identifier.
    
    Duplicate paths are not merged. Callers must not pass the same path
    twice; if they do, both records are encoded in stable order.
    """
    
    def __init__(self, entries: Iterable[Entry] = ()):
        """
        Create a tree.
        
        Args:
            entries: the tree's entries, in any order
        """
        self.entries: List[Entry] = list(entries)  # Copy so caller's list is untouched
        self.object_id: Optional[str] = None
    
    def kind(self) -> ObjectKind:
        return ObjectKind.TREE
    
    def sorted_entries(self) -> List[Entry]:
        """Entries in canonical (byte-wise path) order."""
        return sorted(self.entries, key=lambda entry: encode_path(entry.path))
    
    def serialize(self) -> bytes:
        """
        Encode the tree.
        
        Each entry becomes `100644 <path>\\0<hex object id>`; records are
        concatenated in canonical order.
        
        Raises SerializationError if an entry carries no object identifier.
        """
        records = []
        for entry in self.sorted_entries():
            if not entry.object_id:
                raise SerializationError(
                    self.kind().value,
                    f"entry {entry.path!r} has no object identifier"
                )
            records.append(encode_tree_entry(REGULAR_FILE_MODE, entry.path, entry.object_id))
        return b''.join(records)
    
    def __len__(self) -> int:
        return len(self.entries)
    
    def __repr__(self) -> str:
        return f"Tree(entries={len(self.entries)}, object_id={self.object_id})"
