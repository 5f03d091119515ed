"""Case-insensitive mapping from grocery name to a list of batches."""
from collections.abc import MutableMapping
from typing import Dict, Iterator, List

from foodwaste.domain.Grocery import Grocery


def normalize_key(name: str) -> str:
    return name.strip().lower()


class GroceryIndex(MutableMapping):
    """Dict-like container whose keys are grocery names compared case-insensitively.

    Keys are stored lower-cased, so "Milk", "milk " and "MILK" address the
    same list. Empty lists are never kept: assigning one deletes the key.
    """

    def __init__(self):
        self._data: Dict[str, List[Grocery]] = {}

    def __getitem__(self, name: str) -> List[Grocery]:
        return self._data[normalize_key(name)]

    def __setitem__(self, name: str, groceries: List[Grocery]):
        key = normalize_key(name)
        if groceries:
            self._data[key] = groceries
        else:
            self._data.pop(key, None)

    def __delitem__(self, name: str):
        del self._data[normalize_key(name)]

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and normalize_key(name) in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def batches(self) -> Iterator[Grocery]:
        '''Iterates every batch across all names.'''
        for groceries in self._data.values():
            yield from groceries

    def add(self, grocery: Grocery):
        self._data.setdefault(grocery.key, []).append(grocery)

    def snapshot(self, sort_keys: bool = False) -> Dict[str, List[Grocery]]:
        keys = sorted(self._data) if sort_keys else list(self._data)
        return {k: list(self._data[k]) for k in keys}

    def __repr__(self) -> str:
        return f"GroceryIndex({self._data!r})"
