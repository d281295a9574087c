"""
Content-addressed hashing using SHA-1.

Provides deterministic identifier computation for all object kinds.
"""

import hashlib

# Shard directories are named by this many leading hex characters.
SHARD_PREFIX_LENGTH = 2


def compute_hash(data: bytes) -> str:
    """
    Compute hash of raw bytes.
    
    Returns lowercase hex-encoded SHA-1 digest (40 characters).
    """
    return hashlib.sha1(data).hexdigest()


def get_hash_prefix(hash_str: str, prefix_length: int = SHARD_PREFIX_LENGTH) -> str:
    """
    Get prefix of hash for directory sharding.
    
    Default is 2 characters, creating 256 subdirectories.
    """
    if len(hash_str) <= prefix_length:
        raise ValueError(f"Hash too short for prefix length {prefix_length}")
    return hash_str[:prefix_length]


def split_hash(hash_str: str, prefix_length: int = SHARD_PREFIX_LENGTH) -> tuple[str, str]:
    """Split a hash into its shard prefix and the remaining file name."""
    prefix = get_hash_prefix(hash_str, prefix_length)
    return prefix, hash_str[prefix_length:]
