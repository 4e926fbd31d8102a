"""Coded values, physical quantities and links found in FEST documents."""

from __future__ import annotations

from dataclasses import dataclass

from .nodes import Node, child

Lenke = str


def _attr(node: Node, name: str) -> str:
    if node is None:
        return ""
    return node.get(name, "")


def _target(node: Node, attribute: str | None) -> Node:
    return node if attribute is None else child(node, attribute)


@dataclass(frozen=True, eq=False)
class Cs:
    """Coded simple value: a code (V) and its display name (DN)."""

    value: str
    long_value: str

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.value == other
        if isinstance(other, Cs):
            return (self.value, self.long_value) == (other.value, other.long_value)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.value, self.long_value))


@dataclass(frozen=True, eq=False)
class Cv:
    """Coded value: a code (V), its code system (S) and display name (DN)."""

    value: str
    system: str
    long_value: str

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.value == other
        if isinstance(other, Cv):
            return (self.value, self.system, self.long_value) == (
                other.value,
                other.system,
                other.long_value,
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.value, self.system, self.long_value))


@dataclass(frozen=True)
class Pq:
    """Physical quantity: a value (V) and its unit (U)."""

    v: str = ""
    u: str = ""


def get_cs(node: Node, attribute: str | None = None) -> Cs:
    """Coded simple value from the child ``attribute``, or from ``node``."""
    target = _target(node, attribute)
    return Cs(_attr(target, "V"), _attr(target, "DN"))


def get_cv(node: Node, attribute: str | None = None) -> Cv:
    """Coded value from the child ``attribute``, or from ``node``."""
    target = _target(node, attribute)
    return Cv(_attr(target, "V"), _attr(target, "S"), _attr(target, "DN"))


def get_pq(node: Node, attribute: str | None = None) -> Pq:
    """Physical quantity from the child ``attribute``, or from ``node``."""
    target = _target(node, attribute)
    return Pq(_attr(target, "V"), _attr(target, "U"))


def get_lenke(node: Node) -> Lenke:
    """URL held in <Lenke><Www V="..."/></Lenke> under ``node``."""
    return _attr(child(child(node, "Lenke"), "Www"), "V")