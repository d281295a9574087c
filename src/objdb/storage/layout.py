"""
Filesystem layout for object storage.

Implements content-addressed storage with directory sharding.
"""

import logging
from pathlib import Path

from ..errors import StorageError
from ..integrity.hashing import split_hash

logger = logging.getLogger(__name__)

DEFAULT_METADATA_DIR = '.objdb'


class StorageLayout:
    """
    Manages filesystem layout for content-addressed objects.
    
    Layout:
        repo_root/
            .objdb/
                objects/
                    <prefix>/
                        <rest of hash>   # compressed object file
                refs/                    # created empty, reserved
    """
    
    def __init__(self, repo_root: Path, metadata_dir: str = DEFAULT_METADATA_DIR):
        """Initialize storage layout at given root."""
        self.repo_root = Path(repo_root).resolve()
        self.metadata_path = self.repo_root / metadata_dir
        self.objects_dir = self.metadata_path / "objects"
        self.refs_dir = self.metadata_path / "refs"
    
    def initialize(self) -> None:
        """
        Initialize storage directory structure.
        
        Creates all necessary directories.
        Idempotent - safe to call multiple times.
        """
        try:
            self.objects_dir.mkdir(parents=True, exist_ok=True)
            self.refs_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError("initialize", str(self.metadata_path), e)
        logger.debug("Initialized storage layout at %s", self.metadata_path)
    
    def is_initialized(self) -> bool:
        """Check whether the objects directory exists."""
        return self.objects_dir.is_dir()
    
    def get_shard_dir(self, obj_hash: str) -> Path:
        """Get the shard directory an object lives in."""
        prefix, _ = split_hash(obj_hash)
        return self.objects_dir / prefix
    
    def get_object_path(self, obj_hash: str) -> Path:
        """
        Get filesystem path for an object by its hash.
        
        The first 2 characters name the shard directory, the rest the file.
        """
        prefix, rest = split_hash(obj_hash)
        return self.objects_dir / prefix / rest
