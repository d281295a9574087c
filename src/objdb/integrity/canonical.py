"""
Canonical encoding of stored records.

Ensures same object always produces same bytes, and so the same hash.
"""

import os

# Width of the mode field; "100644" left-justified leaves one separating space.
MODE_FIELD_WIDTH = 7


def encode_record(kind: str, payload: bytes) -> bytes:
    """
    Frame a payload as a stored record.
    
    Layout: `<kind> <payload length in bytes>\\0<payload>`, with an ASCII
    header. The identifier is computed over this whole record.
    """
    header = f"{kind} {len(payload)}\0".encode('ascii')
    return header + payload


def encode_path(path: str) -> bytes:
    """
    Encode a path to the bytes it has on disk.
    
    Names that are not valid UTF-8 come back from the filesystem
    surrogate-escaped; they encode back to their original bytes.
    """
    return os.fsencode(path)


def encode_tree_entry(mode: str, path: str, object_id: str) -> bytes:
    """
    Encode one tree entry.
    
    The identifier is kept as hex text, not packed binary.
    """
    return (
        f"{mode:<{MODE_FIELD_WIDTH}}".encode('ascii')
        + encode_path(path)
        + b'\0'
        + object_id.encode('ascii')
    )
