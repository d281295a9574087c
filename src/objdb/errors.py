"""
Error types for object database operations.

All errors are explicit and never silent.
"""


class ObjdbError(Exception):
    """Base exception for all objdb errors."""
    pass


class SerializationError(ObjdbError):
    """Raised when an object cannot produce its canonical encoding."""
    
    def __init__(self, kind: str, reason: str):
        self.kind = kind
        self.reason = reason
        super().__init__(f"Unable to serialize {kind}: {reason}")


class DatabaseError(ObjdbError):
    """Base exception for failures of a single store operation."""
    pass


class ObjectSerializeError(DatabaseError):
    """Raised by the database when the object handed to it failed to serialize."""
    
    def __init__(self, kind: str, cause: SerializationError):
        self.kind = kind
        self.cause = cause
        super().__init__(f"Serialization error: {cause}")


class StorageError(DatabaseError):
    """Raised when filesystem operations fail."""
    
    def __init__(self, operation: str, path: str, cause: Exception = None):
        self.operation = operation
        self.path = path
        self.cause = cause
        msg = f"Storage error during {operation}: {path}"
        if cause:
            msg += f"\nCause: {cause}"
        super().__init__(msg)


class RepositoryNotInitializedError(ObjdbError):
    """Raised when an operation needs an initialized repository."""
    
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Not an objdb repository (run init first): {path}")
