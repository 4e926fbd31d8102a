"""Marketing, generic-group and component details of a package."""

from __future__ import annotations

from dataclasses import dataclass

from .codes import Cv, Pq, get_cv, get_pq
from .nodes import Node, check_empty, child, get_container, get_value

Date = str
IDREF = str


@dataclass(frozen=True)
class Markedsforingsinfo:
    """Marketing information of a package."""

    varenrutgaende: str = ""
    markedsforingsdato: Date = ""
    avregdato: Date = ""
    midlutgattdato: Date = ""
    ompakkeravendose: str = ""


@dataclass(frozen=True, eq=False)
class PakningByttegruppe:
    """Membership of a package in a group of interchangeable generics.

    Two memberships are equal when they refer to the same group; a
    membership also equals the group reference as a string.
    """

    refbyttegruppe: IDREF
    gyldigfradato: Date = ""
    gyldigtildato: Date | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "gyldigtildato", check_empty(self.gyldigtildato))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.refbyttegruppe == other
        if isinstance(other, PakningByttegruppe):
            return self.refbyttegruppe == other.refbyttegruppe
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.refbyttegruppe)


@dataclass(frozen=True)
class Pakningskomponent:
    """One component of a package whose parts are mixed before use."""

    pakningstype: Cv
    mengde: Pq
    antall: str = ""


def get_markedsforingsinfo(node: Node) -> Markedsforingsinfo:
    """Read <Markedsforingsinfo> under ``node``."""
    info = child(node, "Markedsforingsinfo")
    return Markedsforingsinfo(
        varenrutgaende=get_value(info, "VarenrUtgaende"),
        markedsforingsdato=get_value(info, "Markedsforingsdato"),
        avregdato=get_value(info, "AvregDato"),
        midlutgattdato=get_value(info, "MidlUtgattDato"),
        ompakkeravendose=get_value(info, "OmpakkerAvEndose"),
    )


def get_pakningbyttegruppe(node: Node) -> PakningByttegruppe:
    """Read <PakningByttegruppe> under ``node``."""
    gruppe = child(node, "PakningByttegruppe")
    return PakningByttegruppe(
        refbyttegruppe=get_value(gruppe, "RefByttegruppe"),
        gyldigfradato=get_value(gruppe, "GyldigFraDato"),
        gyldigtildato=get_value(gruppe, "GyldigTilDato"),
    )


def _one_pakningskomponent(node: Node) -> Pakningskomponent:
    return Pakningskomponent(
        pakningstype=get_cv(node, "Pakningstype"),
        mengde=get_pq(node, "Mengde"),
        antall=get_value(node, "Mengde"),
    )


def get_pakningskomponent(node: Node) -> list[Pakningskomponent]:
    """Every <Pakningskomponent> directly under ``node``."""
    return get_container(node, "Pakningskomponent", _one_pakningskomponent)