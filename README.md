# festlib

`festlib` reads parts of entries from FEST, the drug catalogue XML file
published for electronic prescriptions in Norway. It needs nothing beyond
the standard library and uses `xml.etree.ElementTree`. Elements are matched
on their local name, so the catalogue's namespaces need no special handling.

## Installing

```
pip install festlib
```

## Loading a document

```python
from festlib.nodes import load_file, parse_string, child

root = load_file("fest.xml")           # or parse_string(xml_text)
kategori = child(root, "KatLegemiddelpakning")
```

Both functions return the `<FEST>` root element. They raise these errors,
all subclasses of `FestError`:

| Error           | When                                         |
|-----------------|----------------------------------------------|
| `FileNotFound`  | the file does not exist                      |
| `IoError`       | the file could not be read                   |
| `NoDocument`    | the input is empty or only whitespace        |
| `BadDocument`   | the input is not well-formed XML             |
| `BadFestFormat` | the root element is not `<FEST>`             |
| `OutOfMemory`   | memory ran out while reading or parsing      |

## Reading values

The helpers in `festlib.nodes` and `festlib.codes` take an element and
return plain Python values. They also accept `None` for a missing element.
An absent child element yields an empty string, and `child` returns `None`.

```python
from festlib.nodes import get_value, get_bool, get_container
from festlib.codes import get_cv, get_cs, get_pq, get_lenke

oppforing = child(kategori, "OppfLegemiddelpakning")
pakning = child(oppforing, "Legemiddelpakning")

varenr = get_value(pakning, "Varenr")          # "526181"
atc = get_cv(pakning, "Atc")                   # Cv(value="N05CF02", ...)
atc.long_value                                 # "Zolpidem"
eans = get_container(pakning, "Ean", get_value)
```

Coded values use these types:

- `Cs` has a code and a display name.
- `Cv` adds a code system.
- `Pq` holds a value and a unit.

A `Cs` or `Cv` compares equal to a string that matches its code.
`get_bool` is true only when the element's text is exactly `"true"`.
`check_empty` returns `None` for an empty string or collection, and for a
coded value whose `long_value` is empty.

## Entry parts

Each part of an entry has its own reader:

| Module                   | Readers                                                                          |
|--------------------------|----------------------------------------------------------------------------------|
| `festlib.merkevare_info` | `get_preparatomtaleavsnitt`, `get_produktinfo`, `get_reseptgyldighet`            |
| `festlib.pakning_info`   | `get_markedsforingsinfo`, `get_pakningbyttegruppe`, `get_pakningskomponent`      |
| `festlib.pakning`        | `get_prisvare`, `get_refusjon`, `get_pakningsinfo`                               |
| `festlib.virkestoff`     | `get_sorteringvirkestoffmedstyrke`, `get_sorteringvirkestoffutenstyrke`          |

```python
from festlib.pakning import get_pakningsinfo, get_prisvare
from festlib.pakning_info import get_markedsforingsinfo, get_pakningbyttegruppe

info = get_pakningsinfo(pakning)[0]
info.reflegemiddelmerkevare

get_markedsforingsinfo(pakning).markedsforingsdato   # "2023-01-01"

gruppe = get_pakningbyttegruppe(pakning)
gruppe == "ID_BF16B775-2109-41A1-8369-2230FDE6B0EE"  # compares the group reference
```

Some optional fields are `None` when the catalogue leaves them empty:

- In `ProduktInfo`: every field, including `varseltrekant` when it is not set.
- `Reseptgyldighet.kjonn`.
- `PakningByttegruppe.gyldigtildato`.
- `Refusjon.forskrivestildato` and `Refusjon.utleverestildato`.

`SortertVirkestoff.sortering` is a list of `(sortering, reference)` pairs
in document order.

## Whole categories

`get_category` applies a function to every entry of a category and returns
a list of the results. `get_category_map` returns a dict keyed by each
result's `key` attribute. The dict is ordered by key, and the first entry
wins when keys repeat.

```python
from festlib.nodes import get_category

ids = get_category(root, "KatLegemiddelpakning", lambda oppf: get_value(oppf, "Id"))
```

## What it does not do

`festlib` reads the parts listed above. It does not assemble complete
`LegemiddelMerkevare` or `Legemiddelpakning` entries. It builds no ready-made
catalogues, and it does not search for interchangeable packages. You combine
the readers into full entries yourself, for example with `get_category`.
There is no command-line tool.