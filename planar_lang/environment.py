"""
Variable Environments
=====================

Layered name -> value scopes for Let bindings.

A child layer shadows its parents and never modifies them, so an
environment can be shared by concurrently evaluated arguments.
"""

from collections import ChainMap
from typing import Any, Dict, Mapping, Optional

from planar_geometry import EVERYWHERE, NOWHERE
from .errors import UnknownVariableError

PREBOUND: Dict[str, Any] = {
    "Nowhere": NOWHERE,
    "Everywhere": EVERYWHERE,
}


class Environment:
    """
    Immutable view over a chain of binding layers.

    Example:
        >>> env = Environment.root().child({'p': Point(0, 0)})
        >>> env.lookup('p')
        Point(x=0.0, y=0.0)
        >>> env.lookup('Nowhere')
        Nowhere()
    """

    def __init__(self, bindings: Optional[Mapping[str, Any]] = None):
        self._scope = ChainMap(dict(bindings or {}))

    @classmethod
    def root(cls) -> "Environment":
        """Environment holding only the pre-bound names."""
        return cls(PREBOUND)

    def child(self, bindings: Mapping[str, Any]) -> "Environment":
        """Return a new layer over this one."""
        env = Environment.__new__(Environment)
        env._scope = self._scope.new_child(dict(bindings))
        return env

    def lookup(self, name: str) -> Any:
        """
        Resolve a name, innermost layer first.

        Raises:
            UnknownVariableError: If no layer binds the name
        """
        try:
            return self._scope[name]
        except KeyError:
            raise UnknownVariableError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._scope

    @property
    def depth(self) -> int:
        return len(self._scope.maps)

    def names(self) -> set:
        return set(self._scope)
