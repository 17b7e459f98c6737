"""
hashring: a consistent hash ring for assigning keys to nodes
Adding or removing a node only remaps the keys that node owned.
"""

__version__ = "1.0.0"
__author__ = "pyHMSSQL Team"

from .core import ConsistentHashRing, RingStore, hash_bytes, derive_virtual_key, to_bytes
from .config import HashRingConfig, RingConfig, LoggingConfig, setup_logging
from .errors import (
    HashRingError,
    NoServerNodes,
    RingCorruptedError,
    NodeEncodingError,
    ConfigurationError,
)

__all__ = [
    'ConsistentHashRing',
    'RingStore',
    'hash_bytes',
    'derive_virtual_key',
    'to_bytes',
    'HashRingConfig',
    'RingConfig',
    'LoggingConfig',
    'setup_logging',
    'HashRingError',
    'NoServerNodes',
    'RingCorruptedError',
    'NodeEncodingError',
    'ConfigurationError',
]
