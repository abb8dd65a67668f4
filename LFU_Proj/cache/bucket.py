# Frequency bucket: the keys that currently share one access count
from collections import OrderedDict
from typing import Hashable, Iterator


class FrequencyBucket:
    """Insertion-ordered set of keys with O(1) add, discard and pop-oldest.

    Keys are stored as the keys of an ``OrderedDict`` so that removal by key
    does not need a scan, while iteration still yields the oldest key first.
    """

    __slots__ = ("frequency", "_keys")

    def __init__(self, frequency: int):
        self.frequency = frequency
        self._keys = OrderedDict()

    def add(self, key: Hashable) -> None:
        # Re-adding moves the key to the back, it is now the newest at this count
        self._keys.pop(key, None)
        self._keys[key] = None

    def discard(self, key: Hashable) -> None:
        self._keys.pop(key, None)

    def pop_oldest(self) -> Hashable:
        if not self._keys:
            raise KeyError(f"bucket {self.frequency} is empty")
        key, _ = self._keys.popitem(last=False)
        return key

    def __contains__(self, key: Hashable) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._keys)

    def __repr__(self) -> str:
        return f"FrequencyBucket({self.frequency}, {list(self._keys)!r})"
