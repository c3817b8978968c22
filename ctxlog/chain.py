"""Immutable chain of scoped attribute and group operations.

Every ``with_attrs``/``with_group`` call on a handler allocates one
:class:`GroupOrAttrs` node pointing at the previous head. Nodes are never
mutated, so any number of derived handlers can share a prefix of the chain.
Traversal runs newest scope first.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .attrs import Attr


@dataclass(frozen=True, slots=True)
class GroupOrAttrs:
    """One scope in the chain: either a group name or a run of attributes."""

    group: str = ""
    attrs: tuple[Attr, ...] = ()
    next: "GroupOrAttrs | None" = None


def with_attrs(chain: GroupOrAttrs | None, attrs: Sequence[Attr]) -> GroupOrAttrs | None:
    """Return a new head that adds ``attrs`` at this scope."""
    if not attrs:
        return chain
    return GroupOrAttrs(attrs=tuple(attrs), next=chain)


def with_group(chain: GroupOrAttrs | None, name: str) -> GroupOrAttrs | None:
    """Return a new head that opens group ``name`` for everything added later."""
    if not name:
        return chain
    return GroupOrAttrs(group=name, next=chain)


def iter_chain(chain: GroupOrAttrs | None) -> Iterator[GroupOrAttrs]:
    """Yield the nodes of ``chain``, newest first."""
    node = chain
    while node is not None:
        yield node
        node = node.next
