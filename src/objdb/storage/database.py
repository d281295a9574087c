"""
Content-addressed object database.

Turns any storable object into a durably persisted, compressed file
named by the hash of its contents.
"""

import logging
import os
import zlib
from pathlib import Path
from typing import BinaryIO, Optional, Tuple

from ..errors import ObjectSerializeError, SerializationError, StorageError
from ..integrity.canonical import encode_record
from ..integrity.hashing import compute_hash
from ..model.base import StorableObject
from .layout import StorageLayout
from .tempnames import TempNameFactory, random_temp_name

logger = logging.getLogger(__name__)

# zlib level 1: compressed bytes are never hashed, so speed wins.
DEFAULT_COMPRESSION_LEVEL = 1


class Database:
    """
    Write-only, content-addressed object database.
    
    Objects are stored by the SHA-1 of their framed record under
    `objects/<2 hex chars>/<remaining 38>`. Once written, objects never
    change: storing the same content again rewrites identical bytes.
    
    Writes go to a uniquely named temporary file in the shard directory,
    are fsynced, then atomically renamed into place. Readers therefore
    never observe a partially written object, and concurrent writers of
    the same object converge on the same final file without locking.
    """
    
    def __init__(
        self,
        layout: StorageLayout,
        temp_name_factory: Optional[TempNameFactory] = None,
        compression_level: int = DEFAULT_COMPRESSION_LEVEL,
    ):
        """
        Initialize the database.
        
        Args:
            layout: storage layout giving the objects directory
            temp_name_factory: callable returning a fresh temp file name;
                defaults to random names
            compression_level: zlib level, 0-9
        """
        if not 0 <= compression_level <= 9:
            raise ValueError(f"Invalid compression level: {compression_level}")
        
        self.layout = layout
        self.temp_name_factory = temp_name_factory or random_temp_name
        self.compression_level = compression_level
    
    def hash_object(self, obj: StorableObject) -> Tuple[str, bytes]:
        """
        Compute an object's identifier without writing anything.
        
        Returns (object_id, record) where record is the uncompressed
        `<kind> <len>\\0<payload>` bytes the identifier was computed over.
        
        Raises ObjectSerializeError if the object fails to serialize.
        """
        kind = obj.kind()
        try:
            payload = obj.serialize()
        except SerializationError as e:
            logger.error("Failed to serialize %s: %s", kind, e.reason)
            raise ObjectSerializeError(str(kind), e) from e
        
        record = encode_record(str(kind), payload)
        return compute_hash(record), record
    
    def store(self, obj: StorableObject) -> str:
        """
        Store an object and return its identifier.
        
        The object's `object_id` is set once the object is published.
        
        Raises ObjectSerializeError if the object cannot be encoded
        (nothing is written), StorageError on any filesystem failure
        (nothing is left at the final path).
        """
        obj_hash, record = self.hash_object(obj)
        obj_path = self.layout.get_object_path(obj_hash)
        
        try:
            compressed = zlib.compress(record, self.compression_level)
        except zlib.error as e:
            raise StorageError("compress", str(obj_path), e) from e
        
        self._write_object_atomic(obj_path, compressed)
        
        obj.object_id = obj_hash
        logger.debug("Stored %s %s (%d bytes)", obj.kind(), obj_hash, len(record))
        return obj_hash
    
    def _create_temp_file(self, dir_path: Path) -> Tuple[BinaryIO, Path]:
        """
        Exclusively create a temporary file inside `dir_path`.
        
        A missing shard directory is created and creation retried once;
        any other failure is fatal.
        """
        temp_path = dir_path / self.temp_name_factory()
        try:
            return open(temp_path, 'xb'), temp_path
        except FileNotFoundError:
            logger.debug("Creating shard directory %s", dir_path)
        except OSError as e:
            raise StorageError("create_temp", str(temp_path), e) from e
        
        try:
            dir_path.mkdir(parents=True, exist_ok=True)
            return open(temp_path, 'xb'), temp_path
        except OSError as e:
            raise StorageError("create_temp", str(temp_path), e) from e
    
    def _write_object_atomic(self, path: Path, data: bytes) -> None:
        """
        Write object file atomically.
        
        Uses temp file + fsync + rename. The temp file is removed on every
        failure path.
        """
        temp_file, temp_path = self._create_temp_file(path.parent)
        try:
            with temp_file:
                temp_file.write(data)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            
            # Publication point
            os.replace(temp_path, path)
        
        except BaseException as e:
            self._discard_temp(temp_path)
            if isinstance(e, OSError):
                logger.error("Failed to write object %s: %s", path, e)
                raise StorageError("write_object", str(path), e) from e
            raise
    
    @staticmethod
    def _discard_temp(temp_path: Path) -> None:
        try:
            temp_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove temporary file %s: %s", temp_path, e)
