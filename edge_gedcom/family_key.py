"""
family_key.py - Canonical keys for family units.

A family is identified by its parents' person ids: two ids are sorted
numerically, a lone parent is paired with the sentinel 0. The same function
keys family pages and links people to their parents' and spouses' families,
so the two sides always agree.
"""

from typing import Iterable, Optional

SENTINEL = 0

def family_key(ids: Iterable[int]) -> Optional[str]:
    """
    Derive the key of the family with the given parents.

    Args:
        ids (Iterable[int]): Zero, one or two positive person ids.

    Returns:
        Optional[str]: e.g. "3-4" or "7-0"; None when no ids are given.

    Raises:
        ValueError: If an id is not a positive integer or more than two ids are given.
    """
    ids = list(ids)
    for person_id in ids:
        if isinstance(person_id, bool) or not isinstance(person_id, int) or person_id <= SENTINEL:
            raise ValueError(f"Family member id must be a positive integer, got {person_id!r}")
    if len(ids) > 2:
        raise ValueError(f"A family has at most two parents, got {ids}")
    if not ids:
        return None
    if len(ids) == 1:
        ids.append(SENTINEL)
    else:
        ids.sort()
    return '-'.join(str(person_id) for person_id in ids)

def make_pointer(record_id, prefix: str = '') -> Optional[str]:
    return None if record_id is None else f'@{prefix}{record_id}@'

def person_pointer(person_id: int) -> str:
    return make_pointer(person_id, 'P')

def family_pointer(key: Optional[str]) -> Optional[str]:
    return make_pointer(key, 'F')
