"""Composition of the final attribute list of a log record.

Walking the chain newest to oldest while always prepending yields both the
group nesting and the oldest-first sibling order in one linear pass.
"""

from collections.abc import Mapping, Sequence

from .attrs import Attr
from .chain import GroupOrAttrs, iter_chain


class _GroupEntry:
    __slots__ = ("attrs", "used")

    def __init__(self, attrs: Sequence[Attr]):
        self.attrs = tuple(attrs)
        self.used = False


def compose(
    chain: GroupOrAttrs | None,
    group_attrs: Mapping[str, Sequence[Attr]],
    prepended: Sequence[Sequence[Attr]],
    record_attrs: Sequence[Attr],
) -> tuple[Attr, ...]:
    """Build the ordered, group-nested attributes of one record.

    Args:
        chain: Head of the handler's scope chain (newest first), or None.
        group_attrs: Context attributes destined for named groups. Each entry
            is injected into the first matching group met while walking the
            chain, at most once; entries whose group is never opened are
            placed at the root.
        prepended: Top-level extractor outputs in registration order. The
            first-registered extractor's attributes come first.
        record_attrs: The record's own attributes, oldest first.

    Returns:
        A new tuple; none of the inputs are modified.
    """
    working = {name: _GroupEntry(attrs) for name, attrs in group_attrs.items()}

    final: list[Attr] = list(record_attrs)

    for node in iter_chain(chain):
        if node.group:
            entry = working.get(node.group)
            if entry is not None and not entry.used:
                entry.used = True
                final = [*entry.attrs, *final]
            final = [Attr(node.group, tuple(final))]
        else:
            final = [*node.attrs, *final]

    # Groups never opened on this chain surface at the root, first staged first.
    for entry in reversed(list(working.values())):
        if not entry.used:
            final = [*entry.attrs, *final]

    for attrs in reversed(prepended):
        final = [*attrs, *final]

    return tuple(final)
