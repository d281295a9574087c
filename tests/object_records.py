"""
Known identifiers and record helpers shared by the tests.
"""

HELLO_OID = 'ce013625030ba8dba906f756967f9e9ca394464a'

# Tree holding a single `hello.txt` entry pointing at HELLO_OID
TREE_OID = '08a4877609c757a4de213b9d6374645379b8ec55'

EMPTY_TREE_OID = '4b825dc642cb6eb9a060e54bf8d69288fbee4904'


def split_record(record: bytes) -> tuple[str, bytes]:
    """
    Split a decompressed record into its kind and payload.
    
    Raises ValueError if the header is malformed or the declared length
    does not match the payload.
    """
    nul = record.find(b'\0')
    if nul < 0:
        raise ValueError("Record header is not NUL-terminated")
    
    try:
        kind, length = record[:nul].decode('ascii').split(' ')
        length = int(length)
    except ValueError as e:
        raise ValueError(f"Malformed record header: {e}")
    
    payload = record[nul + 1:]
    if len(payload) != length:
        raise ValueError(
            f"Record length mismatch: header says {length}, payload has {len(payload)}"
        )
    return kind, payload
