"""Runtime environment for Sprig.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Scopes are shared by reference: a closure
keeps its defining scope alive for as long as the closure itself is alive,
and sees later changes made to it.
"""

from __future__ import annotations

from typing import Optional

from sprig import SprigValue
from sprig.errors import SprigUnboundIdentifier


class Environment:
    """Hierarchical mapping from names to Sprig values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, SprigValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: SprigValue) -> None:
        """Bind `name` to `value` in this frame.

        Re-declaring a name in the same frame replaces the old binding.
        """
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def is_bound(self, name: str) -> bool:
        return self.find(name) is not None

    def set(self, name: str, value: SprigValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises SprigUnboundIdentifier if the name is not found; nothing is
        created in that case.
        """
        env = self.find(name)
        if env is None:
            raise SprigUnboundIdentifier(f"Cannot assign unbound identifier {name}")
        env.vars[name] = value

    def lookup(self, name: str) -> SprigValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises SprigUnboundIdentifier if not found.
        """
        env = self.find(name)
        if env is None:
            raise SprigUnboundIdentifier(f"Cannot lookup unbound identifier {name}")
        return env.vars[name]

    def update(self, mapping: dict[str, SprigValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.vars[k] = v

    def _frame_text(self) -> str:
        return "{" + ", ".join(f"{k}: {v!r}" for k, v in self.vars.items()) + "}"

    def __repr__(self) -> str:
        """Every frame of the chain, innermost first."""
        frames = []
        env: Optional[Environment] = self
        while env is not None:
            frames.append(env._frame_text())
            env = env.outer
        return f"<Environment {' -> '.join(frames)}>"
