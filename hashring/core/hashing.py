"""
Hash function and virtual key derivation for the ring.

Every position on the ring is a 64-bit unsigned integer taken from the first
8 bytes (big-endian) of a BLAKE2s digest. Physical nodes are spread over the
ring with several virtual keys, each derived by bracketing the node's bytes
with the big-endian encoding of ``replica_index * multiplier``:

    idx = (replica_index * multiplier).to_bytes(4, "big")
    key = hash_bytes(idx + node_bytes + idx)

The layout must stay bit-for-bit stable so rings built by different
processes place nodes identically.
"""

import hashlib
from typing import Iterator, SupportsBytes, Tuple, Union

from ..errors import NodeEncodingError

DIGEST_SIZE = 32
KEY_BYTES = 8
INDEX_BYTES = 4
MAX_HASH = (1 << (KEY_BYTES * 8)) - 1
MAX_INDEX_PRODUCT = (1 << (INDEX_BYTES * 8)) - 1

# Defaults for virtual node placement
REPLICAS = 11
MUL = 7
INIT_V_IDX = 0

BytesLike = Union[bytes, bytearray, memoryview, str, SupportsBytes]


def to_bytes(value: BytesLike) -> bytes:
    """Return the canonical byte encoding of a node or item.

    ``str`` is encoded as UTF-8, binary buffers are copied, and any other
    object must implement ``__bytes__``.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    # int has no __bytes__ but bytes(int) would silently build a zero buffer
    if not isinstance(value, int) and hasattr(type(value), "__bytes__"):
        return bytes(value)
    raise NodeEncodingError(
        f"{type(value).__name__} cannot be used as a ring node or item: "
        f"expected str, bytes or an object implementing __bytes__"
    )


def hash_bytes(data: bytes) -> int:
    """Hash ``data`` to a 64-bit ring position"""
    digest = hashlib.blake2s(data, digest_size=DIGEST_SIZE).digest()
    return int.from_bytes(digest[:KEY_BYTES], "big")


def encode_replica_index(replica_index: int, multiplier: int = MUL) -> bytes:
    """Spread a replica index and pack it as 4 big-endian bytes"""
    spread = replica_index * multiplier
    if spread < 0 or spread > MAX_INDEX_PRODUCT:
        raise ValueError(
            f"replica index {replica_index} * {multiplier} does not fit in "
            f"{INDEX_BYTES} bytes"
        )
    return spread.to_bytes(INDEX_BYTES, "big")


def derive_virtual_key(node_bytes: bytes, replica_index: int, multiplier: int = MUL) -> int:
    """Ring position of one virtual replica of a node"""
    idx_bytes = encode_replica_index(replica_index, multiplier)
    return hash_bytes(idx_bytes + node_bytes + idx_bytes)


def replica_keys(node_bytes: bytes, replicas: int = REPLICAS, multiplier: int = MUL,
                 start: int = INIT_V_IDX) -> Iterator[Tuple[int, int]]:
    """Yield ``(replica_index, key)`` for every virtual replica of a node"""
    for replica_index in range(start, start + replicas):
        yield replica_index, derive_virtual_key(node_bytes, replica_index, multiplier)
