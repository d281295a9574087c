"""
Blob object model.

Blobs store the raw contents of a single file.
"""

from typing import Optional

from .base import ObjectKind, StorableObject


class Blob(StorableObject):
    """
    Leaf object containing raw data.
    
    The canonical encoding of a blob is its data, unchanged.
    """
    
    def __init__(self, data: bytes):
        """
        Create a blob from raw bytes.
        
        Args:
            data: raw binary data (bytes, bytearray or memoryview)
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Blob data must be bytes, not {type(data).__name__}")
        self.data = bytes(data)
        self.object_id: Optional[str] = None
    
    def kind(self) -> ObjectKind:
        return ObjectKind.BLOB
    
    def serialize(self) -> bytes:
        return self.data
    
    def size(self) -> int:
        """Get size of blob data in bytes."""
        return len(self.data)
    
    def __repr__(self) -> str:
        return f"Blob(size={len(self.data)}, object_id={self.object_id})"
