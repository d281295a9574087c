"""
Repository engine.

Main entry point coordinating layout, database and workspace.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from .config import Settings
from .errors import RepositoryNotInitializedError
from .model.blob import Blob
from .model.entry import Entry
from .model.tree import Tree
from .storage.database import Database
from .storage.layout import StorageLayout
from .storage.tempnames import TempNameFactory
from .workspace import Workspace

logger = logging.getLogger(__name__)


class Repository:
    """
    A working tree together with its object database.

    This is the primary interface for:
    - Initializing the metadata directory (objects and refs)
    - Storing blobs and trees
    - Committing the working tree as a single tree object
    """

    def __init__(
        self,
        workdir: str | Path,
        settings: Optional[Settings] = None,
        temp_name_factory: Optional[TempNameFactory] = None,
    ):
        """
        Open the repository rooted at `workdir`.

        Args:
            workdir: working tree root
            settings: configuration; defaults to environment settings
            temp_name_factory: passed through to the database
        """
        self.settings = settings or Settings()
        self.workdir = Path(workdir).resolve()
        self.layout = StorageLayout(self.workdir, self.settings.metadata_dir)
        self.database = Database(
            self.layout,
            temp_name_factory=temp_name_factory,
            compression_level=self.settings.compression_level,
        )
        self.workspace = Workspace(self.workdir, ignore=self.settings.ignore_set())

    def initialize(self) -> Path:
        """
        Create the metadata directory with empty objects and refs.

        Safe to call multiple times (idempotent). Returns the metadata path.
        """
        self.layout.initialize()
        return self.layout.metadata_path

    @property
    def is_initialized(self) -> bool:
        return self.layout.is_initialized()

    def store_blob(self, data: bytes) -> str:
        """Store raw bytes as a blob and return its identifier."""
        return self.database.store(Blob(data))

    def store_tree(self, entries: Iterable[Entry]) -> str:
        """Store a tree of already-stored entries and return its identifier."""
        return self.database.store(Tree(entries))

    def commit(self) -> str:
        """
        Store every working-tree file and one tree listing them all.

        Blobs are stored before the tree that references them. The first
        failure aborts the commit.

        Returns:
            str: identifier of the stored tree
        """
        if not self.is_initialized:
            raise RepositoryNotInitializedError(str(self.workdir))

        entries = []
        for path in self.workspace.list_files():
            oid = self.store_blob(self.workspace.read_file(path))
            entries.append(Entry(path, oid))

        tree_oid = self.store_tree(entries)
        logger.info("Tree: %s (%d entries)", tree_oid, len(entries))
        return tree_oid

    def __repr__(self) -> str:
        return f"Repository(path={self.workdir}, initialized={self.is_initialized})"
