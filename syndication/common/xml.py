"""
XML reading and writing primitives.

XmlNavigator is a read-only cursor over an ElementTree element that also
remembers which namespace prefixes were in scope in the source document
(ElementTree itself discards them). XmlWriter builds a tree element by
element, keeping prefixes exactly as the caller chose them so that
namespace declarations can be hoisted to the root before any child is
written.
"""

from typing import Callable, Optional, Union
from xml.etree import ElementTree as ET

from syndication.common.guard import argument_not_empty, argument_not_none

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

DOCUMENT_NODE_NAME = "#document"


def split_qualified_name(tag: str) -> tuple[str, str]:
    """Split a Clark-notation tag into (namespace, local_name)."""
    if tag.startswith("{"):
        namespace, _, local_name = tag[1:].partition("}")
        return namespace, local_name
    return "", tag


def create_namespace_map(
    prefix: str,
    namespace: str,
    default_namespace: Optional[str] = None,
) -> dict[str, str]:
    """
    Build a prefix -> URI map for path selection.

    A caller-supplied default namespace wins over the format's constant,
    for documents that put the vocabulary in the default namespace under
    a different URI.
    """
    return {prefix: default_namespace or namespace}


# =============================================================================
# Reading
# =============================================================================


class XmlNavigator:
    """
    Read-only view of one node of a parsed document.

    Usage:
        navigator = XmlNavigator.from_bytes(payload)
        root = navigator.select_single("blog:blog", {"blog": BLOGML_NAMESPACE})
        title = root.select_single("blog:title", {"blog": BLOGML_NAMESPACE}).value
    """

    def __init__(
        self,
        element: ET.Element,
        scopes: Optional[dict[int, dict[str, str]]] = None,
        inherited: Optional[dict[str, str]] = None,
    ):
        argument_not_none(element, "element")
        self._element = element
        self._scopes = scopes if scopes is not None else {}
        declared = self._scopes.get(id(element), {})
        if declared:
            self._namespaces = {**(inherited or {}), **declared}
        else:
            self._namespaces = inherited or {}

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_bytes(cls, data: bytes, encoding: Optional[str] = None) -> "XmlNavigator":
        """
        Parse a complete document.

        With no encoding the parser honours the XML declaration / BOM.
        With an explicit encoding the bytes are decoded first and the
        declaration is ignored.

        Raises:
            xml.etree.ElementTree.ParseError: If the document is malformed
        """
        argument_not_none(data, "data")
        if encoding:
            return cls.from_string(data.decode(encoding))
        return cls._parse(data)

    @classmethod
    def from_string(cls, text: str) -> "XmlNavigator":
        argument_not_empty(text, "text")
        return cls._parse(text)

    @classmethod
    def from_file(cls, source, encoding: Optional[str] = None) -> "XmlNavigator":
        """Parse from a path or a binary file-like object."""
        argument_not_none(source, "source")
        if hasattr(source, "read"):
            data = source.read()
        else:
            with open(source, "rb") as handle:
                data = handle.read()
        if isinstance(data, str):
            return cls.from_string(data)
        return cls.from_bytes(data, encoding)

    @classmethod
    def _parse(cls, data: Union[bytes, str]) -> "XmlNavigator":
        parser = ET.XMLPullParser(events=("start-ns", "start"))
        scopes: dict[int, dict[str, str]] = {}
        pending: dict[str, str] = {}
        root = None

        parser.feed(data)
        parser.close()
        for event, payload in parser.read_events():
            if event == "start-ns":
                prefix, uri = payload
                pending[prefix] = uri
            elif event == "start":
                if root is None:
                    root = payload
                if pending:
                    scopes[id(payload)] = pending
                    pending = {}

        if root is None:
            raise ET.ParseError("no element found")

        document = ET.Element(DOCUMENT_NODE_NAME)
        document.append(root)
        # Keep the tree alive so element ids in scopes stay valid.
        return cls(document, scopes, {"xml": XML_NAMESPACE})

    # -------------------------------------------------------------------------
    # Node properties
    # -------------------------------------------------------------------------

    @property
    def element(self) -> ET.Element:
        return self._element

    @property
    def is_document(self) -> bool:
        return self._element.tag == DOCUMENT_NODE_NAME

    @property
    def root(self) -> "XmlNavigator":
        """The document element (self when already positioned on an element)."""
        if self.is_document:
            return self._child(self._element[0])
        return self

    @property
    def local_name(self) -> str:
        return split_qualified_name(self._element.tag)[1]

    @property
    def namespace_uri(self) -> str:
        return split_qualified_name(self._element.tag)[0]

    @property
    def namespaces_in_scope(self) -> dict[str, str]:
        """Prefix -> URI bindings visible at this node ("" is the default namespace)."""
        return dict(self._namespaces)

    @property
    def has_attributes(self) -> bool:
        return bool(self._element.attrib)

    @property
    def has_children(self) -> bool:
        return len(self._element) > 0

    @property
    def value(self) -> str:
        """Concatenated text of this node and all descendants."""
        return "".join(self._element.itertext())

    def get_attribute(self, local_name: str, namespace: str = "") -> str:
        """Attribute value, or "" when absent."""
        key = f"{{{namespace}}}{local_name}" if namespace else local_name
        return self._element.get(key, "")

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def _child(self, element: ET.Element) -> "XmlNavigator":
        return XmlNavigator(element, self._scopes, self._namespaces)

    def select(self, path: str, namespaces: Optional[dict[str, str]] = None) -> list["XmlNavigator"]:
        """
        All nodes matching a relative, slash-separated child path.

        Each step is an ElementPath child step ("blog:post", "*"); steps
        are applied one level at a time so every result keeps its
        namespace scope.
        """
        current = [self]
        for step in path.split("/"):
            current = [
                navigator._child(element)
                for navigator in current
                for element in navigator._element.findall(step, namespaces)
            ]
        return current

    def select_single(
        self, path: str, namespaces: Optional[dict[str, str]] = None
    ) -> Optional["XmlNavigator"]:
        """First node matching a relative child path, or None."""
        matches = self.select(path, namespaces)
        return matches[0] if matches else None

    def __repr__(self) -> str:
        return f"<XmlNavigator {self._element.tag}>"


# =============================================================================
# Writing
# =============================================================================


class _Frame:
    __slots__ = ("element", "scope")

    def __init__(self, element: ET.Element, scope: dict[str, str]):
        self.element = element
        self.scope = scope


class XmlWriter:
    """
    Incremental writer producing prefixed, namespace-declared XML.

    Usage:
        writer = XmlWriter()
        writer.start_element("blog", BLOGML_NAMESPACE, "blog")
        writer.write_attribute("root-url", "http://example.org/")
        writer.write_element_string("title", "My blog", BLOGML_NAMESPACE, "blog")
        writer.end_element()
        xml = writer.to_string()
    """

    def __init__(self, minimize_output: bool = False):
        self.minimize_output = minimize_output
        self._root: Optional[ET.Element] = None
        self._stack: list[_Frame] = []

    @property
    def current(self) -> ET.Element:
        if not self._stack:
            raise RuntimeError("No element is open")
        return self._stack[-1].element

    def _qualify(self, frame_scope: dict[str, str], element: ET.Element,
                 local_name: str, namespace: Optional[str], prefix: Optional[str]) -> str:
        if not namespace:
            return local_name
        if prefix is None:
            prefix = next((p for p, uri in frame_scope.items() if uri == namespace), None)
            if prefix is None:
                prefix = f"ns{len(frame_scope)}"
        if frame_scope.get(prefix) != namespace:
            frame_scope[prefix] = namespace
            element.set("xmlns" if prefix == "" else f"xmlns:{prefix}", namespace)
        return f"{prefix}:{local_name}" if prefix else local_name

    def start_element(self, local_name: str, namespace: Optional[str] = None,
                      prefix: Optional[str] = None) -> None:
        argument_not_empty(local_name, "local_name")
        if self._stack:
            scope = dict(self._stack[-1].scope)
            element = ET.SubElement(self.current, local_name)
        elif self._root is not None:
            raise RuntimeError("Document already has a root element")
        else:
            scope = {"xml": XML_NAMESPACE}
            element = ET.Element(local_name)
            self._root = element

        element.tag = self._qualify(scope, element, local_name, namespace, prefix)
        self._stack.append(_Frame(element, scope))

    def write_namespace_declaration(self, prefix: str, namespace: str) -> None:
        """Declare a prefix on the current element unless it is already bound there."""
        argument_not_empty(namespace, "namespace")
        frame = self._stack[-1]
        attribute = "xmlns" if prefix == "" else f"xmlns:{prefix}"
        if frame.scope.get(prefix) == namespace:
            return
        if attribute in frame.element.attrib:
            # Prefix already taken on this element; users redeclare locally.
            return
        frame.scope[prefix] = namespace
        frame.element.set(attribute, namespace)

    def write_attribute(self, local_name: str, value, namespace: Optional[str] = None,
                        prefix: Optional[str] = None) -> None:
        argument_not_empty(local_name, "local_name")
        frame = self._stack[-1]
        if namespace and prefix is None:
            prefix = next(
                (p for p, uri in frame.scope.items() if uri == namespace and p), None
            )
        name = self._qualify(frame.scope, frame.element, local_name, namespace, prefix)
        frame.element.set(name, "" if value is None else str(value))

    def write_string(self, text: Optional[str]) -> None:
        if not text:
            return
        element = self.current
        if len(element):
            last = element[-1]
            last.tail = (last.tail or "") + text
        else:
            element.text = (element.text or "") + text

    def write_element_string(self, local_name: str, value: Optional[str],
                             namespace: Optional[str] = None,
                             prefix: Optional[str] = None) -> None:
        self.start_element(local_name, namespace, prefix)
        self.write_string(value)
        self.end_element()

    def end_element(self) -> None:
        if not self._stack:
            raise RuntimeError("end_element called with no open element")
        self._stack.pop()

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_string(self, xml_declaration: bool = False, encoding: str = "utf-8") -> str:
        if self._root is None:
            return ""
        if self._stack:
            raise RuntimeError("Cannot serialize while elements are still open")
        if not self.minimize_output:
            ET.indent(self._root)
        body = ET.tostring(self._root, encoding="unicode", short_empty_elements=True)
        if xml_declaration:
            return f'<?xml version="1.0" encoding="{encoding}"?>\n{body}'
        return body

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        return self.to_string(xml_declaration=True, encoding=encoding).encode(
            encoding, errors="xmlcharrefreplace"
        )

    def write_to(self, stream, encoding: str = "utf-8") -> None:
        """Write the serialized document to a binary stream."""
        stream.write(self.to_bytes(encoding))


def canonical_xml(write: Callable[[XmlWriter], None]) -> str:
    """Serialize one entity, unindented, as used for hashing."""
    writer = XmlWriter(minimize_output=True)
    write(writer)
    return writer.to_string()
