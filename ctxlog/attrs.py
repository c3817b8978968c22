"""Key/value attributes attached to log records.

An :class:`Attr` is a key and a value. When the value is a tuple of
``Attr`` it is a *group value*: the attributes are nested under the key in
structured output. Keys are not required to be unique within a list.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Attr:
    """A named value attached to a log record."""

    key: str
    value: Any

    @property
    def is_group(self) -> bool:
        """True when the value is a nested tuple of attributes."""
        return isinstance(self.value, tuple) and all(
            isinstance(a, Attr) for a in self.value
        )

    def __repr__(self) -> str:
        return f"{self.key}={self.value!r}"


def to_attrs(*args: Any, **kwargs: Any) -> tuple[Attr, ...]:
    """Normalize call arguments into a tuple of attributes.

    Positional arguments must already be :class:`Attr` instances; keyword
    arguments follow them, in call order.
    """
    attrs: list[Attr] = []
    for arg in args:
        if not isinstance(arg, Attr):
            raise TypeError(
                f"positional attributes must be Attr instances, got {type(arg).__name__}"
            )
        attrs.append(arg)
    attrs.extend(Attr(k, v) for k, v in kwargs.items())
    return tuple(attrs)


def group(key: str, *args: Any, **kwargs: Any) -> Attr:
    """Build a group-valued attribute named ``key``."""
    return Attr(key, to_attrs(*args, **kwargs))


def attrs_to_dict(attrs: Iterable[Attr]) -> dict[str, Any]:
    """Nested dict view of ``attrs``. Groups become dicts; later keys win."""
    out: dict[str, Any] = {}
    for a in attrs:
        out[a.key] = attrs_to_dict(a.value) if a.is_group else a.value
    return out


def flatten_attrs(attrs: Iterable[Attr], prefix: str = "") -> dict[str, Any]:
    """Flat view of ``attrs`` with group keys joined by dots.

    ``[Attr("req", (Attr("status", 200),))]`` becomes ``{"req.status": 200}``.
    """
    out: dict[str, Any] = {}
    for a in attrs:
        key = f"{prefix}{a.key}"
        if a.is_group:
            out.update(flatten_attrs(a.value, prefix=f"{key}."))
        else:
            out[key] = a.value
    return out
