"""Field resolvers used by the hierarchical validator to read field values."""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from functools import lru_cache
from types import MemberDescriptorType
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import FieldResolutionError

if TYPE_CHECKING:
    from ..ports.validation import FieldAccessor, IFieldResolver


class AttributeFieldResolver:
    """Resolves fields by name, searching the object's whole type hierarchy.

    A field counts as declared when it is an instance attribute, a mapping
    key (for mapping objects), or appears as an attribute, slot, property or
    annotation on any class of ``type(obj).__mro__``, most-derived first.
    Declared fields that were never assigned resolve to ``None``.
    """

    def resolve(self, obj: Any, field_name: str) -> Any:
        if obj is None:
            return None

        if isinstance(obj, Mapping):
            if field_name in obj:
                return obj[field_name]
            raise FieldResolutionError(
                field_name,
                type(obj).__name__,
                [str(k) for k in obj],
            )

        if field_name in _instance_attributes(obj) or _declared_on_type(
            type(obj), field_name
        ):
            return _read_field(obj, field_name)

        raise FieldResolutionError(
            field_name, type(obj).__name__, _available_fields(obj)
        )


class AccessorFieldResolver:
    """Resolves fields through explicit accessor functions.

    Usage::

        resolver = AccessorFieldResolver(
            {"total": lambda order: order.total, "city": lambda o: o.address.city}
        )

    Fields without an accessor are delegated to *fallback* when given,
    otherwise they raise :class:`FieldResolutionError`.
    """

    def __init__(
        self,
        accessors: Mapping[str, FieldAccessor],
        fallback: IFieldResolver | None = None,
    ) -> None:
        self._accessors = dict(accessors)
        self._fallback = fallback

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._accessors)

    def resolve(self, obj: Any, field_name: str) -> Any:
        if obj is None:
            return None
        accessor = self._accessors.get(field_name)
        if accessor is not None:
            return accessor(obj)
        if self._fallback is not None:
            return self._fallback.resolve(obj, field_name)
        raise FieldResolutionError(
            field_name, type(obj).__name__, list(self._accessors)
        )


# -- internals ---------------------------------------------------------------


_UNSET = object()


def _read_field(obj: Any, field_name: str) -> Any:
    """Read a declared field; errors raised by descriptors propagate."""
    static = inspect.getattr_static(obj, field_name, _UNSET)
    if static is _UNSET:
        # annotation-only declaration, never assigned
        return None
    if isinstance(static, MemberDescriptorType):
        try:
            return static.__get__(obj, type(obj))
        except AttributeError:
            # slot declared but never assigned
            return None
    return getattr(obj, field_name)


def _instance_attributes(obj: Any) -> Mapping[str, Any]:
    return getattr(obj, "__dict__", None) or {}


@lru_cache(maxsize=1024)
def _declared_on_type(cls: type, field_name: str) -> bool:
    for klass in cls.__mro__:
        if klass is object:
            continue
        if field_name in vars(klass) or field_name in _annotations(klass):
            return True
    return False


def _annotations(klass: type) -> Mapping[str, Any]:
    return inspect.get_annotations(klass)


def _available_fields(obj: Any) -> list[str]:
    names = set(_instance_attributes(obj))
    for klass in type(obj).__mro__:
        if klass is object:
            continue
        names.update(_annotations(klass))
        names.update(vars(klass))
    return [n for n in names if not n.startswith("_")]
