"""Small markup helpers used by the SVG composer."""

from __future__ import annotations

import copy
import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Tuple

from .errors import MarkupParseError

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def format_number(value: float) -> str:
    """Format ``value`` with 15 significant digits and a ``.`` separator.

    The output never depends on the process locale. Whole numbers lose their
    fractional part, so ``30.0`` renders as ``30``.
    """

    if value == 0:
        return "0"
    return format(value, ".15g")


class MarkupElement:
    """A parsed XML document reduced to its root element.

    Attributes set through :meth:`set` only affect this object's tree, and
    :meth:`serialize` writes the element back with the namespace prefixes
    the source document declared.
    """

    def __init__(self, root: ET.Element, namespaces: Optional[List[Tuple[str, str]]] = None):
        self._root = root
        self._namespaces = list(namespaces or [])

    @classmethod
    def parse(cls, text: str) -> "MarkupElement":
        root: Optional[ET.Element] = None
        namespaces: List[Tuple[str, str]] = []
        parser = ET.XMLPullParser(events=("start", "start-ns"))
        try:
            # feed() queues syntax errors; read_events() raises them.
            parser.feed(text)
            parser.close()
            events = list(parser.read_events())
        except ET.ParseError as exc:
            raise MarkupParseError(f"logo markup has no well-formed root element: {exc}") from exc

        for event, item in events:
            if event == "start-ns":
                namespaces.append(item)
            elif root is None:
                root = item
        if root is None:  # pragma: no cover - expat rejects documents without a root
            raise MarkupParseError("logo markup has no root element")
        return cls(root, namespaces)

    def set(self, name: str, value: str) -> "MarkupElement":
        self._root.set(name, value)
        return self

    def serialize(self) -> str:
        """Return the element as a single line of markup without an XML declaration."""

        prefixes = self._prefix_map()
        root = copy.deepcopy(self._root)
        for element in root.iter():
            element.tag = _prefixed(element.tag, prefixes)
            attributes = {_prefixed(key, prefixes): value for key, value in element.attrib.items()}
            element.attrib.clear()
            element.attrib.update(attributes)
            if element.text is not None and not element.text.strip():
                element.text = None
            if element.tail is not None and not element.tail.strip():
                element.tail = None
        root.tail = None

        declarations: Dict[str, str] = {}
        for uri in _used_namespaces(self._root):
            if uri == XML_NAMESPACE:
                continue
            prefix = prefixes[uri]
            declarations["xmlns:" + prefix if prefix else "xmlns"] = uri
        attributes = dict(declarations)
        attributes.update(root.attrib)
        root.attrib.clear()
        root.attrib.update(attributes)
        return ET.tostring(root, encoding="unicode")

    def _prefix_map(self) -> Dict[str, str]:
        # SVG elements are always written unprefixed.
        prefixes: Dict[str, str] = {XML_NAMESPACE: "xml", SVG_NAMESPACE: ""}
        used = {"xml", ""}
        for prefix, uri in self._namespaces:
            if uri in prefixes or prefix in used:
                continue
            prefixes[uri] = prefix
            used.add(prefix)
        for uri in _used_namespaces(self._root):
            if uri in prefixes:
                continue
            if uri == XLINK_NAMESPACE and "xlink" not in used:
                prefix = "xlink"
            else:
                prefix = "ns%d" % len(used)
                while prefix in used:
                    prefix += "_"
            logger.debug("Assigning prefix %r to namespace %s", prefix, uri)
            prefixes[uri] = prefix
            used.add(prefix)
        return prefixes


def _used_namespaces(root: ET.Element) -> List[str]:
    uris: List[str] = []
    for element in root.iter():
        for name in [element.tag, *element.attrib]:
            if not isinstance(name, str) or not name.startswith("{"):
                continue
            uri = name[1:].split("}", 1)[0]
            if uri not in uris:
                uris.append(uri)
    return uris


def _prefixed(name: str, prefixes: Dict[str, str]) -> str:
    if not isinstance(name, str) or not name.startswith("{"):
        return name
    uri, local = name[1:].split("}", 1)
    prefix = prefixes[uri]
    return f"{prefix}:{local}" if prefix else local
