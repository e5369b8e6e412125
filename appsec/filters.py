"""Client-side filtering for list endpoints that take no server-side filter."""

from typing import Any, List, Sequence


def keep_matching(items: Sequence[Any], attribute: str, wanted: Any) -> List[Any]:
    """
    Keep the entries whose ``attribute`` equals ``wanted``, in original order.

    An empty ``wanted`` (``None``, ``""`` or ``0``) disables the filter and the
    entries come back unchanged. No match yields an empty list.
    """
    if not wanted:
        return list(items)
    return [item for item in items if getattr(item, attribute, None) == wanted]
