"""Pantry inventory: ordered set of owned ingredient names, case-sensitive as entered."""
from typing import Iterable, List, Optional

from mealbudget.domain.errors import InvalidInputError


class PantryInventory:
    def __init__(self, items: Optional[Iterable[str]] = None):
        # dict preserves insertion order and drops exact duplicates
        self._items = tuple(dict.fromkeys(items or ()))

    def add(self, item: str) -> "PantryInventory":
        '''
        Returns a pantry with item appended.
        Blank items are rejected; an item already present returns the same pantry.
        '''
        if not isinstance(item, str) or not item.strip():
            raise InvalidInputError("Pantry item cannot be empty")
        if item in self._items:
            return self
        return PantryInventory(self._items + (item,))

    def remove(self, item: str) -> "PantryInventory":
        '''
        Returns a pantry without item. Missing items return the same pantry.
        '''
        if item not in self._items:
            return self
        return PantryInventory(i for i in self._items if i != item)

    def get_items(self) -> List[str]:
        return list(self._items)

    def __contains__(self, item) -> bool:
        return item in self._items

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other):
        if not isinstance(other, PantryInventory):
            return NotImplemented
        return self._items == other._items

    def __str__(self) -> str:
        items_str = ",\n\t".join(self._items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self):
        return list(self._items)
