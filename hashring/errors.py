"""
Exception types raised by the hash ring
"""

from typing import List, Optional


class HashRingError(Exception):
    """Base exception for hash ring errors"""
    pass


class NoServerNodes(HashRingError):
    """Raised when a lookup is made against a ring with no registered nodes"""

    def __init__(self, message: str = "there are no server nodes currently registered in the ring"):
        super().__init__(message)


class RingCorruptedError(HashRingError):
    """Raised when the ring's internal ordering no longer matches its contents"""
    pass


class NodeEncodingError(HashRingError, TypeError):
    """Raised when a node or item cannot be converted to bytes"""
    pass


class ConfigurationError(HashRingError, ValueError):
    """Raised for an invalid ring configuration"""

    def __init__(self, errors: List[str], message: Optional[str] = None):
        self.errors = list(errors)
        super().__init__(message or "invalid configuration: " + "; ".join(self.errors))
