"""
URL components that can be left out of an equality check.

A :class:`ComponentSet` is an immutable set of :class:`Component` members.
Sets are built by combining members with ``|``::

    ignore = Component.QUERY | Component.FRAGMENT
    assert Component.QUERY in ignore
"""

from enum import Enum
from typing import FrozenSet
from typing import Iterable
from typing import Iterator
from typing import Union

from urleq.exception import UnknownComponent

__author__ = "urleq"


class Component(Enum):
    """One named structural field of a URL."""

    SCHEME = "scheme"
    USER = "user"
    PASSWORD = "password"
    HOST = "host"
    PORT = "port"
    PATH = "path"
    QUERY = "query"
    FRAGMENT = "fragment"

    @classmethod
    def from_name(cls, name):
        """
        Look up a component by member name or value, ignoring case.

        :param name: For instance "query" or "QUERY"
        :return: A Component instance
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownComponent("Unknown URL component: %s" % name, name) from None

    def __or__(self, other):
        return ComponentSet([self]) | other

    def __ror__(self, other):
        return ComponentSet([self]) | other


ComponentLike = Union[Component, str]


class ComponentSet:
    """Set of URL components, used as the ignore set of a comparison."""

    __slots__ = ("_members",)

    def __init__(self, components: Iterable[ComponentLike] = ()) -> None:
        if isinstance(components, (Component, str)):
            components = [components]
        self._members: FrozenSet[Component] = frozenset(
            Component.from_name(c) for c in components
        )

    @classmethod
    def all(cls):
        """Return the set holding every component."""
        return cls(Component)

    @classmethod
    def coerce(cls, value) -> "ComponentSet":
        """
        Turn whatever a caller passed as ignore set into a ComponentSet.

        :param value: None, a Component, a component name, a ComponentSet or
            an iterable of components/names
        :return: ComponentSet instance
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls(value)

    def contains(self, component: Component) -> bool:
        return component in self._members

    def union(self, other) -> "ComponentSet":
        return ComponentSet(self._members | ComponentSet.coerce(other)._members)

    def issubset(self, other) -> bool:
        return self._members <= ComponentSet.coerce(other)._members

    def __contains__(self, component):
        return self.contains(component)

    def __or__(self, other):
        if not isinstance(other, (ComponentSet, Component, str)):
            return NotImplemented
        return self.union(other)

    __ror__ = __or__

    def __iter__(self) -> Iterator[Component]:
        # Declaration order so that output is stable
        return (c for c in Component if c in self._members)

    def __len__(self):
        return len(self._members)

    def __bool__(self):
        return bool(self._members)

    def __eq__(self, other):
        if isinstance(other, ComponentSet):
            return self._members == other._members
        if isinstance(other, (set, frozenset)):
            return self._members == other
        return NotImplemented

    def __hash__(self):
        return hash(self._members)

    def __repr__(self):
        return "ComponentSet([%s])" % ", ".join(c.name for c in self)
