"""Product information attached to a LegemiddelMerkevare entry."""

from __future__ import annotations

from dataclasses import dataclass

from .codes import Cs, Cv, Lenke, get_cs, get_cv, get_lenke
from .nodes import Node, check_empty, child, get_bool, get_value


@dataclass(frozen=True)
class Preparatomtaleavsnitt:
    """Section of the summary of product characteristics and its URL."""

    avsnittoverskrift: Cs
    lenke: Lenke = ""


@dataclass(frozen=True)
class ProduktInfo:
    """Marketing authorisation holder and related product details.

    Values that are absent in the document are stored as ``None``: a
    warning triangle that is not set, empty names and a vaccine standard
    without a display name.
    """

    varseltrekant: bool | None = None
    referanseprodukt: str | None = None
    vaksinestandard: Cv | None = None
    produsent: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "varseltrekant", True if self.varseltrekant else None)
        object.__setattr__(self, "referanseprodukt", check_empty(self.referanseprodukt))
        object.__setattr__(self, "vaksinestandard", check_empty(self.vaksinestandard))
        object.__setattr__(self, "produsent", check_empty(self.produsent))


@dataclass(frozen=True)
class Reseptgyldighet:
    """How long a prescription is valid, optionally per gender."""

    kjonn: Cs | None = None
    varighet: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "kjonn", check_empty(self.kjonn))


def get_preparatomtaleavsnitt(node: Node) -> Preparatomtaleavsnitt:
    """Read <Preparatomtaleavsnitt> under ``node``."""
    avsnitt = child(node, "Preparatomtaleavsnitt")
    return Preparatomtaleavsnitt(
        avsnittoverskrift=get_cs(avsnitt, "Avsnittoverskrift"),
        lenke=get_lenke(avsnitt),
    )


def get_produktinfo(node: Node) -> ProduktInfo:
    """Read <ProduktInfo> under ``node``."""
    info = child(node, "ProduktInfo")
    return ProduktInfo(
        varseltrekant=get_bool(info, "Varseltrekant"),
        referanseprodukt=get_value(info, "Referanseprodukt"),
        vaksinestandard=get_cv(info, "Vaksinestandard"),
        produsent=get_value(info, "Produsent"),
    )


def get_reseptgyldighet(node: Node) -> Reseptgyldighet:
    """Read <Reseptgyldighet> under ``node``."""
    gyldighet = child(node, "Reseptgyldighet")
    return Reseptgyldighet(
        kjonn=get_cs(gyldighet, "Kjonn"),
        varighet=get_value(gyldighet, "Varighet"),
    )