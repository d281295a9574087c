"""
Working-tree access.

Lists and reads the files a commit is built from.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import StorageError

logger = logging.getLogger(__name__)

DEFAULT_IGNORE = frozenset({'.objdb', '.git', 'target'})


class Workspace:
    """
    Read-only view of a working tree.
    
    Paths are always returned relative to the root, in POSIX form.
    Directories are never returned; neither is anything whose relative
    path is in the ignore set (an ignored directory hides its contents).
    """
    
    def __init__(self, root: Path, ignore: Optional[Iterable[str]] = None):
        self.root = Path(root).resolve()
        self.ignore = frozenset(DEFAULT_IGNORE if ignore is None else ignore)
    
    def list_files(self) -> List[str]:
        """
        List all regular files below the root, sorted.
        
        Symlinked directories are not followed.
        """
        files = []
        pending = [self.root]
        
        while pending:
            directory = pending.pop()
            try:
                children = list(directory.iterdir())
            except OSError as e:
                raise StorageError("list_dir", str(directory), e) from e
            
            for child in children:
                rel = child.relative_to(self.root).as_posix()
                if rel in self.ignore:
                    logger.debug("Ignoring path: %s", rel)
                    continue
                
                if child.is_dir() and not child.is_symlink():
                    pending.append(child)
                elif child.is_file():
                    files.append(rel)
        
        return sorted(files)
    
    def read_file(self, path: str) -> bytes:
        """Read a file given relative to the root."""
        full_path = self.root / path
        try:
            return full_path.read_bytes()
        except OSError as e:
            raise StorageError("read_file", str(full_path), e) from e
