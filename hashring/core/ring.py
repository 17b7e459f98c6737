"""
Consistent hash ring.

Physical nodes are placed on a 64-bit ring through several virtual keys each.
An item is served by the first virtual key found walking clockwise from the
item's own hash, so removing a node only moves the items that node owned.

The ring is not thread-safe. Callers sharing one instance between threads
must guard ``add``/``remove`` against concurrent ``get`` themselves.
"""

import logging
from typing import Any, Iterable, List, Optional

from .hashing import to_bytes, hash_bytes, derive_virtual_key, replica_keys
from .store import RingStore
from ..config import RingConfig, HashRingConfig
from ..errors import ConfigurationError, NoServerNodes

logger = logging.getLogger(__name__)


class ConsistentHashRing:
    """Consistent hash ring with virtual node replication"""

    def __init__(self, config: Optional[RingConfig] = None):
        self.config = config or RingConfig()

        errors = self.config.validate()
        if errors:
            raise ConfigurationError(errors)

        # Sorted ring position -> node, holding every virtual replica
        self._ring = RingStore()

        # Count of unique physical nodes
        self._count = 0

        logger.info(f"Initialized consistent hash ring with {self.replicas} replicas per node "
                    f"(spread multiplier {self.spread_multiplier})")

    @classmethod
    def from_settings(cls, settings: HashRingConfig) -> 'ConsistentHashRing':
        """Create a ring from the ring section of a full configuration"""
        return cls(settings.ring)

    @property
    def replicas(self) -> int:
        return self.config.replicas

    @property
    def spread_multiplier(self) -> int:
        return self.config.spread_multiplier

    def _representative_key(self, node_bytes: bytes) -> int:
        return derive_virtual_key(node_bytes, self.config.initial_replica_index,
                                  self.config.spread_multiplier)

    def _virtual_keys(self, node_bytes: bytes) -> List[int]:
        return [key for _, key in replica_keys(node_bytes, self.config.replicas,
                                               self.config.spread_multiplier,
                                               self.config.initial_replica_index)]

    def add(self, node: Any) -> None:
        """Add a physical node; adding a node already on the ring does nothing"""
        node_bytes = to_bytes(node)
        if self._representative_key(node_bytes) in self._ring:
            logger.debug(f"Node {node!r} already on the ring")
            return

        keys = self._virtual_keys(node_bytes)

        # Stored nodes must not alias caller-owned buffers
        if isinstance(node, (bytearray, memoryview)):
            node = bytes(node)

        self._count += 1
        for key in keys:
            self._ring.insert(key, node)

        logger.debug(f"Added node {node!r}, {self._count} nodes on the ring")

    def remove(self, node: Any) -> None:
        """Remove a physical node; removing an absent node does nothing"""
        node_bytes = to_bytes(node)
        if self._representative_key(node_bytes) not in self._ring:
            return

        keys = self._virtual_keys(node_bytes)
        self._count -= 1
        for key in keys:
            self._ring.discard(key)

        logger.debug(f"Removed node {node!r}, {self._count} nodes on the ring")

    def get(self, item: Any) -> Any:
        """Return the node responsible for ``item``.

        The item is hashed once, without replica spreading, and assigned to
        the first ring position at or after that hash, wrapping around to the
        lowest position.

        Raises:
            NoServerNodes: if no node has been added
        """
        item_hash = hash_bytes(to_bytes(item))
        if not self._ring:
            raise NoServerNodes()

        _, node = self._ring.successor(item_hash)
        return node

    def get_node_count(self) -> int:
        """Number of physical nodes currently on the ring"""
        return self._count

    def members(self) -> List[Any]:
        """Physical nodes on the ring, ordered by their representative position"""
        nodes = []
        for key, node in self._ring.items():
            if self._representative_key(to_bytes(node)) == key:
                nodes.append(node)
        return nodes

    def set_members(self, nodes: Iterable[Any]) -> None:
        """Replace the ring membership with ``nodes``"""
        wanted = {}
        for node in nodes:
            wanted.setdefault(to_bytes(node), node)

        for node in self.members():
            if to_bytes(node) not in wanted:
                self.remove(node)

        for node in wanted.values():
            self.add(node)

    def __contains__(self, node: Any) -> bool:
        try:
            node_bytes = to_bytes(node)
        except TypeError:
            return False
        return self._representative_key(node_bytes) in self._ring

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return (f"ConsistentHashRing(nodes={self._count}, replicas={self.replicas}, "
                f"positions={len(self._ring)})")
