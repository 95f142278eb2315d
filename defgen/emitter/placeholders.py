"""Deferred extends-clause resolution."""

from __future__ import annotations

from typing import Dict, Iterator, Set


PLACEHOLDER_PREFIX = "#{ExtendsPlaceholder_"


def placeholder_token(base_name: str) -> str:
    return PLACEHOLDER_PREFIX + base_name + "}"


def escape_placeholders(text: str) -> str:
    """Break up placeholder-looking text so reconciliation leaves it alone."""
    return text.replace(PLACEHOLDER_PREFIX, "#\\{ExtendsPlaceholder_")


class ExtendsRegistry:
    """Maps base-type names to their extends-clause text for one generation run.

    The first registration for a base name wins. Bases marked unresolved are
    reconciled to an empty string so the derived declaration stays valid.
    """

    def __init__(self) -> None:
        self._clauses: Dict[str, str] = {}
        self._unresolved: Set[str] = set()

    def register(self, base_name: str, clause: str) -> None:
        self._clauses.setdefault(base_name, clause)

    def mark_unresolved(self, base_name: str) -> None:
        self._unresolved.add(base_name)

    def clause_for(self, base_name: str) -> str:
        if base_name in self._unresolved:
            return ""
        return self._clauses.get(base_name, "")

    def base_names(self) -> Iterator[str]:
        """Registered base names in first-registration order."""
        return iter(self._clauses)

    def __contains__(self, base_name: object) -> bool:
        return base_name in self._clauses

    def __len__(self) -> int:
        return len(self._clauses)


def reconcile(body: str, registry: ExtendsRegistry) -> str:
    """Replace every placeholder token in ``body`` with its resolved clause."""
    for base_name in registry.base_names():
        body = body.replace(placeholder_token(base_name), registry.clause_for(base_name))
    return body


__all__ = ["ExtendsRegistry", "PLACEHOLDER_PREFIX", "escape_placeholders", "placeholder_token", "reconcile"]
