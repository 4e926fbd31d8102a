"""XML document loading and node helpers for FEST files.

Nodes are :class:`xml.etree.ElementTree.Element` objects. A missing node is
``None``, and every helper accepts ``None`` and then yields an empty result.
Namespaces are ignored: elements are matched by their local name.
"""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterator, Sized
from typing import Any, Optional, TypeVar

T = TypeVar("T")

Node = Optional[ET.Element]

ROOT_NAME = "FEST"


class FestError(RuntimeError):
    """Base class for errors raised while reading a FEST document."""


class FileNotFound(FestError):
    """The FEST file does not exist."""


class IoError(FestError):
    """The FEST file could not be read."""


class OutOfMemory(FestError):
    """There was not enough memory to load the document."""


class NoDocument(FestError):
    """The input held no document at all."""


class BadDocument(FestError):
    """The input is not well-formed XML."""


class BadFestFormat(FestError):
    """The document is XML but not a FEST document."""


def _check_root(root: ET.Element) -> ET.Element:
    if local_name(root) != ROOT_NAME:
        raise BadFestFormat(
            f"expected root element <{ROOT_NAME}>, found <{local_name(root)}>"
        )
    return root


def _parse(data: str | bytes, source: str) -> ET.Element:
    if not (data.strip() if isinstance(data, (str, bytes)) else data):
        raise NoDocument(f"{source}: no document")
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise BadDocument(f"{source}: {exc}") from exc
    except MemoryError as exc:
        raise OutOfMemory(f"{source}: out of memory") from exc
    return _check_root(root)


def parse_string(text: str | bytes) -> ET.Element:
    """Parse a FEST document held in memory and return its <FEST> element."""
    return _parse(text, "<string>")


def load_file(path: str | os.PathLike[str]) -> ET.Element:
    """Read and parse a FEST file, returning its <FEST> element."""
    name = os.fspath(path)
    try:
        with open(name, "rb") as handle:
            data = handle.read()
    except FileNotFoundError as exc:
        raise FileNotFound(f"{name}: file not found") from exc
    except MemoryError as exc:
        raise OutOfMemory(f"{name}: out of memory") from exc
    except OSError as exc:
        raise IoError(f"{name}: {exc}") from exc
    return _parse(data, name)


def local_name(element: Node) -> str:
    """Element tag without its namespace; empty for a missing node."""
    if element is None:
        return ""
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _children(node: Node) -> Iterator[ET.Element]:
    if node is None:
        return iter(())
    return (c for c in node if isinstance(c.tag, str))


def child(node: Node, name: str) -> Node:
    """First child element with the given local name, or ``None``."""
    return next((c for c in _children(node) if local_name(c) == name), None)


def get_value(node: Node, attribute: str | None = None) -> str:
    """Text of the child element ``attribute``, or of ``node`` itself.

    Missing elements and elements without text give an empty string.
    """
    target = node if attribute is None else child(node, attribute)
    if target is None or target.text is None:
        return ""
    return target.text


def get_bool(node: Node, attribute: str) -> bool:
    """True when the text of the child element is exactly ``"true"``."""
    return get_value(node, attribute) == "true"


def compare_value(attribute: str, child_node: Node) -> bool:
    """True when ``child_node`` has the local name ``attribute``."""
    return local_name(child_node) == attribute


def get_container(
    node: Node, attribute: str, func: Callable[[ET.Element], T]
) -> list[T]:
    """Apply ``func`` to every child of ``node`` named ``attribute``."""
    return [func(c) for c in _children(node) if compare_value(attribute, c)]


def get_category(
    node: Node, category: str, func: Callable[[ET.Element], T]
) -> list[T]:
    """Apply ``func`` to every entry of the category element ``category``."""
    return [func(entry) for entry in _children(child(node, category))]


def get_category_map(
    node: Node, category: str, func: Callable[[ET.Element], T]
) -> dict[str, T]:
    """Entries of a category keyed by their ``key`` attribute.

    The first entry wins on duplicate keys; the mapping is ordered by key.
    """
    entries: dict[str, T] = {}
    for entry in _children(child(node, category)):
        result = func(entry)
        entries.setdefault(getattr(result, "key"), result)
    return dict(sorted(entries.items()))


def check_empty(value: Any) -> Any:
    """Return ``value``, or ``None`` when it is empty.

    Coded values count as empty when their ``long_value`` is empty; strings
    and collections when they have no items.
    """
    if value is None:
        return None
    long_value = getattr(value, "long_value", None)
    if isinstance(long_value, str):
        return value if long_value else None
    if isinstance(value, Sized):
        return value if len(value) else None
    return value