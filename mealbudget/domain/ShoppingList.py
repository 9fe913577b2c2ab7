"""ShoppingList value object: derived ingredient names with an ephemeral checked flag."""
from typing import Iterable, List, Optional

from mealbudget.domain.errors import NotFoundError


class ShoppingListItem:
    def __init__(self, name: str, checked: bool = False):
        self.name = name
        self.checked = checked

    def __eq__(self, other):
        if not isinstance(other, ShoppingListItem):
            return NotImplemented
        return (self.name, self.checked) == (other.name, other.checked)

    def __str__(self) -> str:
        mark = "x" if self.checked else " "
        return f"[{mark}] {self.name}"

    __repr__ = __str__

    def to_dict(self):
        return {"name": self.name, "checked": self.checked}


class ShoppingList:
    def __init__(self, items: Optional[Iterable[ShoppingListItem]] = None):
        self._items = tuple(items or ())

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "ShoppingList":
        '''Wraps every name with a fresh, unchecked item.'''
        return cls(ShoppingListItem(name) for name in names)

    def toggle_item(self, name: str) -> "ShoppingList":
        '''
        Returns a list with the checked flag of the named item flipped.
        '''
        if name not in self.names():
            raise NotFoundError("Shopping list item", name)
        return ShoppingList(
            ShoppingListItem(i.name, not i.checked) if i.name == name else i
            for i in self._items
        )

    def get_items(self) -> List[ShoppingListItem]:
        return list(self._items)

    def names(self) -> List[str]:
        return [i.name for i in self._items]

    def checked_count(self) -> int:
        return sum(1 for i in self._items if i.checked)

    def summary(self):
        checked = self.checked_count()
        return {"count": len(self._items), "checked": checked, "remaining": len(self._items) - checked}

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other):
        if not isinstance(other, ShoppingList):
            return NotImplemented
        return self._items == other._items

    def __str__(self) -> str:
        return "Shopping List Items:\n\t" + ",\n\t".join(str(i) for i in self._items)

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self):
        return [i.to_dict() for i in self._items]
