"""Keyed catalog registry shared by the primitive and sequence catalogs.

Catalog entries are immutable frozen models, so items are registered
directly (no factories) and handed out without copying. A catalog is
filled once at startup and then frozen.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def normalize_key(s: str) -> str:
    """Normalize key for lookup (lowercase, alphanumeric/underscore only)."""
    return "".join(ch.lower() if ch.isalnum() else "_" for ch in s).strip("_")


class ItemNotFoundError(KeyError):
    """Raised when a catalog item is not found."""

    pass


class KeyedCatalog(Generic[T]):
    """Registry of immutable items looked up by id or alias.

    Subclasses name the item kind and say how to read an item's id and
    display name.

    Example:
        >>> library = PrimitiveLibrary()
        >>> library.register(split_step)
        >>> library.get("split step").id
        'SPLIT'
    """

    kind: str = "item"

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: dict[str, T] = {}
        self._aliases: dict[str, str] = {}  # normalized_key -> item id
        self._frozen = False
        for item in items:
            self.register(item)

    def _item_id(self, item: T) -> str:
        raise NotImplementedError(f"{type(self).__name__} must implement _item_id()")

    def _item_name(self, item: T) -> str | None:
        return None

    def register(self, item: T, *, aliases: Iterable[str] = ()) -> None:
        """Register an item.

        Args:
            item: Item to register.
            aliases: Additional aliases for lookup.

        Raises:
            RuntimeError: If the catalog has been frozen.
            ValueError: If the id is already registered.
        """
        if self._frozen:
            raise RuntimeError(f"{type(self).__name__} is frozen; cannot register")

        item_id = self._item_id(item)
        if item_id in self._items:
            raise ValueError(f"{self.kind.capitalize()} already registered: {item_id}")

        self._items[item_id] = item

        name = self._item_name(item)
        all_aliases = {item_id, *aliases} | ({name} if name else set())
        for a in all_aliases:
            self._aliases[normalize_key(a)] = item_id

        logger.debug(f"Registered {self.kind}: {item_id}")

    def freeze(self) -> None:
        """Reject further registrations."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _resolve_id(self, key: str) -> str:
        if key in self._items:
            return key
        return self._aliases.get(normalize_key(key), key)

    def get(self, key: str) -> T:
        """Lookup item by id or alias.

        Raises:
            ItemNotFoundError: If the item is not found.
        """
        item = self._items.get(self._resolve_id(key))
        if item is None:
            raise ItemNotFoundError(f"Unknown {self.kind}: {key}")
        return item

    def has(self, key: str) -> bool:
        return self._resolve_id(key) in self._items

    def list_ids(self) -> list[str]:
        """List all registered ids, in registration order."""
        return list(self._items)

    def values(self) -> list[T]:
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items.values()))
