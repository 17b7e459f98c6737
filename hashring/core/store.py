"""
Ordered storage of ring positions
"""

import logging
from typing import Any, Iterator, Optional, Tuple

from sortedcontainers import SortedDict

from ..errors import NoServerNodes, RingCorruptedError

logger = logging.getLogger(__name__)


class RingStore:
    """Ordered mapping of ring position to node.

    Keys are kept sorted by ``SortedDict``, so iteration is always in
    ascending ring order and the successor of a position is found with a
    single bisection instead of sorting the ring on every lookup.
    """

    def __init__(self):
        self._entries: SortedDict = SortedDict()

    def insert(self, key: int, node: Any) -> Optional[Any]:
        """Map ``key`` to ``node``, returning the node it replaced if any"""
        previous = self._entries.get(key)
        if previous is not None:
            logger.debug(f"Ring position {key:#018x} collision, overwriting {previous!r} with {node!r}")
        self._entries[key] = node
        return previous

    def discard(self, key: int) -> Optional[Any]:
        """Remove ``key`` if present and return the node it held"""
        return self._entries.pop(key, None)

    def successor(self, key: int) -> Tuple[int, Any]:
        """Return the first entry at or after ``key``, wrapping to the start.

        Raises:
            NoServerNodes: if the store is empty
        """
        size = len(self._entries)
        if size == 0:
            raise NoServerNodes()

        index = self._entries.bisect_left(key)
        if index >= size:
            index = 0

        try:
            return self._entries.peekitem(index)
        except IndexError as e:
            raise RingCorruptedError(
                f"no ring entry at index {index} of {size} for position {key:#018x}"
            ) from e

    def items(self):
        return self._entries.items()

    def __contains__(self, key: int) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"RingStore(entries={len(self._entries)})"
