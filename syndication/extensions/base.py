"""
Extension contract and the extensible-entity trait.

An extension owns one XML namespace, reads its own elements from the
fragment of the entity it is attached to, and writes them back after the
entity's native content. Concrete extensions subclass SyndicationExtension
and set the class-level namespace metadata.
"""

from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Iterable, Iterator, Optional, TypeVar

from syndication.common.comparison import ComparableEntity
from syndication.common.guard import argument_not_none
from syndication.common.xml import XmlNavigator, XmlWriter

X = TypeVar("X", bound="SyndicationExtension")


class SyndicationExtension(ComparableEntity, ABC):
    """
    Base class for namespace-scoped extensions.

    Subclasses must define:
        namespace: XML namespace URI the extension owns
        prefix: Conventional prefix bound to that namespace
        _load(): Populate from a fragment, return True if anything matched
        write_to(): Serialize the extension's elements

    Usage:
        extension = SlashSyndicationExtension()
        extension.section = "Technology"
        post.add_extension(extension)
    """

    namespace: ClassVar[str] = ""
    prefix: ClassVar[str] = ""
    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    documentation: ClassVar[str] = ""

    def __init__(self):
        self.parent: Optional["ExtensibleObject"] = None
        # URI the elements were read from; written back under the same URI.
        self.namespace_uri: str = self.namespace

    def resolve_namespace(
        self,
        navigator: XmlNavigator,
        reserved_namespace: Optional[str] = None,
    ) -> str:
        """
        Namespace to read with.

        A source document that binds this extension's prefix to another URI
        wins, unless that URI is the reserved (core format) namespace.
        """
        bound = navigator.namespaces_in_scope.get(self.prefix)
        if bound and bound != reserved_namespace:
            return bound
        return self.namespace

    def create_namespace_map(self, namespace: Optional[str] = None) -> dict[str, str]:
        return {self.prefix: namespace or self.namespace}

    def load(self, navigator: XmlNavigator, namespace: Optional[str] = None) -> bool:
        """
        Populate this extension from the children of a fragment.

        Args:
            navigator: Element the extension's elements are children of
            namespace: Namespace URI to match (defaults to the declared one)

        Returns:
            True if at least one element in the namespace was read
        """
        argument_not_none(navigator, "navigator")
        loaded = self._load(navigator, self.create_namespace_map(namespace))
        if loaded:
            self.namespace_uri = namespace or self.namespace
        return loaded

    @abstractmethod
    def _load(self, navigator: XmlNavigator, namespaces: dict[str, str]) -> bool:
        pass

    @abstractmethod
    def write_to(self, writer: XmlWriter) -> None:
        pass

    def to_xml(self) -> str:
        writer = XmlWriter(minimize_output=True)
        writer.start_element("extension")
        writer.write_namespace_declaration(self.prefix, self.namespace_uri)
        self.write_to(writer)
        writer.end_element()
        return writer.to_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.prefix}={self.namespace_uri}>"


class ExtensibleObject:
    """
    Trait for entities that carry extensions.

    The extension list keeps insertion order, permits several instances of
    the same type and never holds None. Attaching an extension that is
    already owned elsewhere detaches it from its previous owner.
    """

    def __init__(self):
        super().__init__()
        self._extensions: list[SyndicationExtension] = []

    @property
    def extensions(self) -> tuple[SyndicationExtension, ...]:
        return tuple(self._extensions)

    @property
    def has_extensions(self) -> bool:
        return bool(self._extensions)

    def add_extension(self, extension: SyndicationExtension) -> bool:
        argument_not_none(extension, "extension")
        previous = extension.parent
        if previous is not None and previous is not self:
            previous.remove_extension(extension)
        elif previous is self and any(e is extension for e in self._extensions):
            return False
        extension.parent = self
        self._extensions.append(extension)
        return True

    def remove_extension(self, extension: SyndicationExtension) -> bool:
        argument_not_none(extension, "extension")
        for index, attached in enumerate(self._extensions):
            if attached is extension:
                del self._extensions[index]
                extension.parent = None
                return True
        return False

    def clear_extensions(self) -> None:
        for extension in self._extensions:
            extension.parent = None
        self._extensions.clear()

    def find_extension(
        self, predicate: Callable[[SyndicationExtension], bool]
    ) -> Optional[SyndicationExtension]:
        argument_not_none(predicate, "predicate")
        return next((e for e in self._extensions if predicate(e)), None)

    def find_extensions(self, extension_type: type[X]) -> list[X]:
        return [e for e in self._extensions if isinstance(e, extension_type)]

    def extensible_children(self) -> Iterable["ExtensibleObject"]:
        """Directly owned extensible sub-entities, in document order."""
        return ()

    def walk_extensible(self) -> Iterator["ExtensibleObject"]:
        """Pre-order traversal of this entity and every extensible descendant."""
        yield self
        for child in self.extensible_children():
            if child is not None:
                yield from child.walk_extensible()
