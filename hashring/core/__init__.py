"""
Core ring components
"""

from .hashing import to_bytes, hash_bytes, derive_virtual_key, replica_keys, REPLICAS, MUL, INIT_V_IDX
from .store import RingStore
from .ring import ConsistentHashRing

__all__ = [
    'to_bytes',
    'hash_bytes',
    'derive_virtual_key',
    'replica_keys',
    'REPLICAS',
    'MUL',
    'INIT_V_IDX',
    'RingStore',
    'ConsistentHashRing',
]
