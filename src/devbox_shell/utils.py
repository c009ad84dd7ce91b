"""Small sequence helpers."""

from collections.abc import Iterable, Sequence


def exclude(items: Sequence[str], elems: Iterable[str]) -> list[str]:
    """Return items without any entry found in elems, keeping the original order."""
    excluded = set(elems)
    return [item for item in items if item not in excluded]
