"""
Tag id input parsing.

Upload clients send tag ids in one of two shapes:

    tagIds=1,2,3                 → DelimitedTagIds("1,2,3")
    tagIds=1&tagIds=2&tagIds=3   → TagIdList(("1", "2", "3"))

parse_tag_ids() is the single place that turns either shape into a list of
ids. Entries that are not positive integers are dropped; duplicates collapse
and first-seen order is kept.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence, Union


@dataclass(frozen=True)
class DelimitedTagIds:
    """One comma-separated string."""

    raw: str


@dataclass(frozen=True)
class TagIdList:
    """A sequence of ids, as repeated form fields or a JSON array."""

    items: tuple[Any, ...]


TagIdsInput = Union[DelimitedTagIds, TagIdList]


def tag_ids_from_form(values: Optional[Sequence[str]]) -> Optional[TagIdsInput]:
    """Classify the raw tagIds form values."""
    if not values:
        return None
    if len(values) == 1:
        return DelimitedTagIds(values[0])
    return TagIdList(tuple(values))


def _to_tag_id(item: Any) -> Optional[int]:
    if isinstance(item, bool):
        return None
    if isinstance(item, int):
        return item if item > 0 else None
    if isinstance(item, str):
        item = item.strip()
        if item.isascii() and item.isdigit():
            value = int(item)
            return value if value > 0 else None
    return None


def _split(items: Iterable[Any]) -> Iterable[Any]:
    for item in items:
        if isinstance(item, str) and "," in item:
            yield from item.split(",")
        else:
            yield item


def parse_tag_ids(value: Optional[TagIdsInput]) -> list[int]:
    """
    Resolve tag id input to unique positive ids.

    Example:
        parse_tag_ids(DelimitedTagIds("1, 2,abc,2"))  # [1, 2]
        parse_tag_ids(TagIdList((3, "4", None)))      # [3, 4]
    """
    if value is None:
        return []
    if isinstance(value, DelimitedTagIds):
        items: Iterable[Any] = value.raw.split(",")
    elif isinstance(value, TagIdList):
        items = _split(value.items)
    else:
        raise TypeError(f"Unsupported tag id input: {type(value).__name__}")

    seen: dict[int, None] = {}
    for item in items:
        tag_id = _to_tag_id(item)
        if tag_id is not None:
            seen.setdefault(tag_id, None)
    return list(seen)
