"""Ordered references to the active ingredients of a product."""

from __future__ import annotations

from dataclasses import dataclass, field

from .nodes import Node, get_container, get_value

IDREF = str


@dataclass
class SortertVirkestoff:
    """Active ingredient references paired with their sort order."""

    sortering: list[tuple[str, IDREF]] = field(default_factory=list)

    def add(self, sortering: str, refvirkestoff: IDREF) -> None:
        """Append an ingredient reference with its sort order."""
        self.sortering.append((sortering, refvirkestoff))


def _collect(node: Node, element: str, reference: str) -> SortertVirkestoff:
    result = SortertVirkestoff()
    pairs = get_container(
        node,
        element,
        lambda n: (get_value(n, "Sortering"), get_value(n, reference)),
    )
    for sortering, ref in pairs:
        result.add(sortering, ref)
    return result


def get_sorteringvirkestoffmedstyrke(node: Node) -> SortertVirkestoff:
    """Every <SortertVirkestoffMedStyrke> directly under ``node``."""
    return _collect(node, "SortertVirkestoffMedStyrke", "RefVirkestoffMedStyrke")


def get_sorteringvirkestoffutenstyrke(node: Node) -> SortertVirkestoff:
    """Every <SortertVirkestoffUtenStyrke> directly under ``node``."""
    return _collect(node, "SortertVirkestoffUtenStyrke", "RefVirkestoff")