"""
Structure Diff Module
Generic deep comparison of nested dicts/lists, reporting ordered diff entries.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

ADDED = 'added'
DELETED = 'deleted'
EDITED = 'edited'
ARRAY = 'array'

Path = Tuple[Any, ...]
IgnoreFn = Callable[[Path, Any], bool]


@dataclass
class DiffEntry:
    kind: str
    path: Path
    lhs: Any = None
    rhs: Any = None
    index: Optional[int] = None
    item: Optional['DiffEntry'] = None

    @property
    def full_path(self) -> Path:
        """Path including the list index for array changes."""
        if self.kind == ARRAY:
            return self.path + (self.index,)
        return self.path

    @property
    def change_kind(self) -> str:
        """The effective kind, looking through array wrappers."""
        if self.kind == ARRAY and self.item is not None:
            return self.item.kind
        return self.kind


def ignore_parent_key(path: Path, key: Any) -> bool:
    # parent back-references make the tree cyclic
    return key == 'parent'


def _kind_of(value: Any) -> str:
    if isinstance(value, dict):
        return 'dict'
    if isinstance(value, list):
        return 'list'
    return 'scalar'


def _diff(lhs: Any, rhs: Any, path: Path, ignore: Optional[IgnoreFn], changes: List[DiffEntry]) -> None:
    if lhs is rhs:
        return

    lkind, rkind = _kind_of(lhs), _kind_of(rhs)
    if lkind != rkind:
        changes.append(DiffEntry(EDITED, path, lhs=lhs, rhs=rhs))
        return

    if lkind == 'dict':
        for key in lhs:
            if ignore and ignore(path, key):
                continue
            if key not in rhs:
                changes.append(DiffEntry(DELETED, path + (key,), lhs=lhs[key]))
            else:
                _diff(lhs[key], rhs[key], path + (key,), ignore, changes)
        for key in rhs:
            if key in lhs or (ignore and ignore(path, key)):
                continue
            changes.append(DiffEntry(ADDED, path + (key,), rhs=rhs[key]))
    elif lkind == 'list':
        for i, item in enumerate(lhs):
            if i >= len(rhs):
                changes.append(DiffEntry(ARRAY, path, index=i, item=DiffEntry(DELETED, path, lhs=item)))
            else:
                _diff(item, rhs[i], path + (i,), ignore, changes)
        for i in range(len(lhs), len(rhs)):
            changes.append(DiffEntry(ARRAY, path, index=i, item=DiffEntry(ADDED, path, rhs=rhs[i])))
    elif lhs != rhs:
        changes.append(DiffEntry(EDITED, path, lhs=lhs, rhs=rhs))


def structural_diff(lhs: Any, rhs: Any, ignore: Optional[IgnoreFn] = None) -> List[DiffEntry]:
    """
    Compare two nested structures and return the differences in traversal order.

    Dict keys are visited in the left side's insertion order, then keys only on
    the right. Surplus list items are reported as ARRAY entries wrapping an
    ADDED/DELETED item. An empty list means the structures are equal.

    The walk has no cycle detection of its own: any back-references must be
    excluded through ignore.
    """
    changes: List[DiffEntry] = []
    _diff(lhs, rhs, (), ignore, changes)
    return changes
