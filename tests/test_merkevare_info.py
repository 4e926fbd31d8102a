import pytest

from festlib.codes import Cs, Cv
from festlib.merkevare_info import (
    ProduktInfo,
    Reseptgyldighet,
    get_preparatomtaleavsnitt,
    get_produktinfo,
    get_reseptgyldighet,
)
from festlib.nodes import child, parse_string

M30_NS = "http://www.kith.no/xmlstds/eresept/m30/2014-12-01"
FORSKRIVNING_NS = "http://www.kith.no/xmlstds/eresept/forskrivning/2014-12-01"

MERKEVARE_XML = f"""
<FEST xmlns="{M30_NS}">
  <HentetDato>2023-09-08T03:11:43</HentetDato>
  <KatLegemiddelMerkevare>
    <OppfLegemiddelMerkevare>
      <Id>ID_DE995772-8BBC-4164-8A0C-044CFC522794</Id>
      <Tidspunkt>2023-06-05T03:11:16</Tidspunkt>
      <Status V="A" DN="Aktiv oppføring"/>
      <LegemiddelMerkevare xmlns="{FORSKRIVNING_NS}">
        <Varenavn>Kodimagnyl Ikke-stoppende dak</Varenavn>
        <LegemiddelformLang>Tablett, filmdrasjert</LegemiddelformLang>
        <Preparatomtaleavsnitt>
          <Avsnittoverskrift V="SCHUMANN_001" DN="INNHOLDSFORTEGNELSE"/>
          <Lenke>
            <Www V="https://www.example.com/lenke/is"/>
          </Lenke>
        </Preparatomtaleavsnitt>
        <ProduktInfo>
          <Produsent>Orifarm Healthcare</Produsent>
        </ProduktInfo>
        <Reseptgyldighet>
          <Varighet>P1Y</Varighet>
        </Reseptgyldighet>
      </LegemiddelMerkevare>
    </OppfLegemiddelMerkevare>
  </KatLegemiddelMerkevare>
</FEST>
"""

FULL_INFO = """
<FEST>
  <Merkevare>
    <ProduktInfo>
      <Varseltrekant>true</Varseltrekant>
      <Referanseprodukt>Paralgin forte</Referanseprodukt>
      <Vaksinestandard V="1" S="2.16.578.1.12.4.1.1.7447" DN="Standard"/>
      <Produsent>Sykehusapotek</Produsent>
    </ProduktInfo>
    <Reseptgyldighet>
      <Kjonn V="K" DN="Kvinne"/>
      <Varighet>P2Y</Varighet>
    </Reseptgyldighet>
  </Merkevare>
</FEST>
"""


@pytest.fixture
def merkevare():
    root = parse_string(MERKEVARE_XML)
    oppforing = child(child(root, "KatLegemiddelMerkevare"), "OppfLegemiddelMerkevare")
    return child(oppforing, "LegemiddelMerkevare")


@pytest.fixture
def full():
    return child(parse_string(FULL_INFO), "Merkevare")


def test_preparatomtaleavsnitt_from_node(merkevare):
    avsnitt = get_preparatomtaleavsnitt(merkevare)
    assert avsnitt.lenke != ""
    assert avsnitt.lenke == "https://www.example.com/lenke/is"
    assert avsnitt.avsnittoverskrift.value == "SCHUMANN_001"
    assert avsnitt.avsnittoverskrift.long_value == "INNHOLDSFORTEGNELSE"


def test_preparatomtaleavsnitt_missing_is_empty():
    avsnitt = get_preparatomtaleavsnitt(None)
    assert avsnitt.lenke == ""
    assert avsnitt.avsnittoverskrift == Cs("", "")


def test_produktinfo_from_node(merkevare):
    info = get_produktinfo(merkevare)
    assert info.vaksinestandard is None
    assert info.produsent == "Orifarm Healthcare"
    assert info.varseltrekant is None
    assert info.referanseprodukt is None


def test_produktinfo_all_fields(full):
    info = get_produktinfo(full)
    assert info.varseltrekant is True
    assert info.referanseprodukt == "Paralgin forte"
    assert info.vaksinestandard == Cv("1", "2.16.578.1.12.4.1.1.7447", "Standard")
    assert info.produsent == "Sykehusapotek"


def test_produktinfo_constructor_normalises_empty_values():
    info = ProduktInfo(False, "", Cv("1", "S", ""), "")
    assert (info.varseltrekant, info.referanseprodukt) == (None, None)
    assert (info.vaksinestandard, info.produsent) == (None, None)


def test_reseptgyldighet_from_node(merkevare):
    gyldighet = get_reseptgyldighet(merkevare)
    assert gyldighet.varighet == "P1Y"
    assert gyldighet.kjonn is None


def test_reseptgyldighet_with_gender(full):
    gyldighet = get_reseptgyldighet(full)
    assert gyldighet.varighet == "P2Y"
    assert gyldighet.kjonn == "K"
    assert gyldighet.kjonn.long_value == "Kvinne"


def test_reseptgyldighet_kjonn_without_display_name_is_none():
    assert Reseptgyldighet(Cs("K", ""), "P1Y").kjonn is None