"""Prices, reimbursement and package details of a Legemiddelpakning entry."""

from __future__ import annotations

from dataclasses import dataclass, field

from .codes import Cv, Pq, get_cv, get_pq
from .nodes import Node, check_empty, child, get_container, get_value
from .pakning_info import Date, IDREF, Pakningskomponent, get_pakningskomponent


@dataclass(frozen=True)
class PrisVare:
    """One price of a package, such as AIP, AUP or the reimbursement price."""

    type: Cv
    pris: Pq
    gyldigfradato: Date = ""
    gyldigtildato: Date = ""


@dataclass(frozen=True)
class Refusjon:
    """Reimbursement groups a package belongs to and their validity.

    The end dates for prescribing and dispensing are ``None`` when the
    document gives none.
    """

    refrefusjonsgruppe: list[IDREF] = field(default_factory=list)
    gyldigfradato: Date = ""
    forskrivestildato: Date | None = None
    utleverestildato: Date | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "forskrivestildato", check_empty(self.forskrivestildato)
        )
        object.__setattr__(self, "utleverestildato", check_empty(self.utleverestildato))


@dataclass(frozen=True)
class Pakningsinfo:
    """Size, type and amounts of one package."""

    reflegemiddelmerkevare: IDREF
    pakningsstr: str
    enhetpakning: Cv
    pakningstype: Cv
    multippel: str
    antall: str
    mengde: str
    sortering: str
    ddd: Pq
    statistikkfaktor: str
    pakningskomponent: list[Pakningskomponent] = field(default_factory=list)


def _one_prisvare(node: Node) -> PrisVare:
    return PrisVare(
        type=get_cv(node, "Type"),
        pris=get_pq(node, "Pris"),
        gyldigfradato=get_value(node, "GyldigFraDato"),
        gyldigtildato=get_value(node, "GyldigTilDato"),
    )


def get_prisvare(node: Node) -> list[PrisVare]:
    """Every <PrisVare> directly under ``node``."""
    return get_container(node, "PrisVare", _one_prisvare)


def get_refusjon(node: Node) -> Refusjon:
    """Read <Refusjon> under ``node``."""
    refusjon = child(node, "Refusjon")
    return Refusjon(
        refrefusjonsgruppe=get_container(
            refusjon, "RefRefusjonsgruppe", lambda n: get_value(n)
        ),
        gyldigfradato=get_value(refusjon, "GyldigFraDato"),
        forskrivestildato=get_value(refusjon, "ForskrivesTilDato"),
        utleverestildato=get_value(refusjon, "UtleveresTilDato"),
    )


def _one_pakningsinfo(node: Node) -> Pakningsinfo:
    return Pakningsinfo(
        reflegemiddelmerkevare=get_value(node, "RefLegemiddelMerkevare"),
        pakningsstr=get_value(node, "Pakningsstr"),
        enhetpakning=get_cv(node, "EnhetPakning"),
        pakningstype=get_cv(node, "Pakningstype"),
        multippel=get_value(node, "Multippel"),
        antall=get_value(node, "Antall"),
        mengde=get_value(node, "Mengde"),
        sortering=get_value(node, "Sortering"),
        ddd=get_pq(node, "DDD"),
        statistikkfaktor=get_value(node, "Statistikkfaktor"),
        pakningskomponent=get_pakningskomponent(node),
    )


def get_pakningsinfo(node: Node) -> list[Pakningsinfo]:
    """Every <Pakningsinfo> directly under ``node``."""
    return get_container(node, "Pakningsinfo", _one_pakningsinfo)