"""
Storable object contract.

Every object the database can persist reports its kind and produces
its canonical byte encoding.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional


class ObjectKind(str, Enum):
    """Object kinds, valued by the literal used in the on-disk header."""
    
    BLOB = 'blob'
    TREE = 'tree'
    
    def __str__(self) -> str:
        return self.value


class StorableObject(ABC):
    """
    Abstract object accepted by the database.
    
    Implementations must keep `serialize()` a pure function of their own
    state: the database hashes its output, so two equal objects must always
    encode to the same bytes.
    
    `object_id` stays None until the database has stored the object.
    """
    
    object_id: Optional[str] = None
    
    @abstractmethod
    def kind(self) -> ObjectKind:
        """Return the object's kind."""
    
    @abstractmethod
    def serialize(self) -> bytes:
        """
        Produce the canonical byte encoding of this object.
        
        Raises SerializationError if the object cannot be encoded.
        """
