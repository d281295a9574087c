"""
objdb: a content-addressable object store.

Objects (blobs of file data and trees listing them) are stored under the
SHA-1 of their framed contents, zlib-compressed, in sharded directories.
"""

from .engine import Repository
from .model.base import ObjectKind, StorableObject
from .model.blob import Blob
from .model.entry import Entry
from .model.tree import Tree
from .storage.database import Database
from .storage.layout import StorageLayout
from .workspace import Workspace
from .errors import (
    ObjdbError,
    SerializationError,
    DatabaseError,
    ObjectSerializeError,
    StorageError,
    RepositoryNotInitializedError,
)

__all__ = [
    'Repository',
    'ObjectKind',
    'StorableObject',
    'Blob',
    'Entry',
    'Tree',
    'Database',
    'StorageLayout',
    'Workspace',
    'ObjdbError',
    'SerializationError',
    'DatabaseError',
    'ObjectSerializeError',
    'StorageError',
    'RepositoryNotInitializedError',
]
