from __future__ import annotations

import uuid
from typing import Iterable, Protocol, TypeVar

from regret.core.errors import NotFound


class _HasId(Protocol):
    id: uuid.UUID


T = TypeVar("T", bound=_HasId)


def find_by_id(items: Iterable[T], item_id: uuid.UUID | str, *, what: str = "Item") -> T:
    """Return the element of ``items`` whose id equals ``item_id``.

    Ids are compared as strings so a raw path segment and a UUID match alike.
    Raises NotFound when nothing matches.
    """
    wanted = str(item_id)
    for item in items:
        if str(item.id) == wanted:
            return item
    raise NotFound(f"{what} not found.")
