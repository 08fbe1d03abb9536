"""
Discovery, attachment and serialization of extensions.

fill() runs at every extensible node while a document is loaded;
collect_extension_types() is the pre-pass run before a save so that every
extension namespace in use is declared once on the root element.
"""

from typing import Iterable, Optional

from core.logging import get_logger
from syndication.common.guard import argument_not_none
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter
from syndication.extensions.base import ExtensibleObject, SyndicationExtension

logger = get_logger(__name__)


class ExtensionAdapter:
    """Stateless helpers; every method is a static method."""

    @staticmethod
    def fill(
        entity: ExtensibleObject,
        navigator: XmlNavigator,
        settings: LoadSettings,
        reserved_namespace: Optional[str] = None,
    ) -> int:
        """
        Attach every recognized extension present under a fragment.

        Extension types are tried in the order they were registered in
        settings, not in document order. A type that resolves to the
        reserved namespace, or that is the entity's own type, is skipped.

        Args:
            entity: Entity to attach extensions to
            navigator: Element whose children are inspected
            settings: Supplies recognized_extensions
            reserved_namespace: Namespace of the format being parsed

        Returns:
            Number of extensions attached
        """
        argument_not_none(entity, "entity")
        argument_not_none(navigator, "navigator")
        argument_not_none(settings, "settings")

        attached = 0
        for extension_type in settings.recognized_extensions:
            if extension_type is type(entity):
                continue

            extension = extension_type()
            namespace = extension.resolve_namespace(navigator, reserved_namespace)
            if reserved_namespace and namespace == reserved_namespace:
                continue

            if extension.load(navigator, namespace):
                entity.add_extension(extension)
                attached += 1
                logger.debug(
                    "Extension attached",
                    extension=extension_type.__name__,
                    entity=type(entity).__name__,
                    namespace=namespace,
                )
        return attached

    @staticmethod
    def write_extensions_to(
        extensions: Iterable[SyndicationExtension],
        writer: XmlWriter,
    ) -> None:
        """Write extensions in attachment order."""
        argument_not_none(extensions, "extensions")
        argument_not_none(writer, "writer")
        for extension in extensions:
            extension.write_to(writer)

    @staticmethod
    def collect_extension_types(root: ExtensibleObject) -> list[type]:
        """
        Distinct extension types attached anywhere in a document graph.

        Walks the graph pre-order through each entity's
        extensible_children(); types are returned in first-seen order.
        """
        argument_not_none(root, "root")
        found: list[type] = []
        for entity in root.walk_extensible():
            for extension in entity.extensions:
                extension_type = type(extension)
                if extension_type not in found:
                    found.append(extension_type)
        return found

    @staticmethod
    def write_namespace_declarations(
        extension_types: Iterable[type],
        writer: XmlWriter,
    ) -> None:
        """Declare each extension's prefix on the element currently open."""
        argument_not_none(extension_types, "extension_types")
        argument_not_none(writer, "writer")
        for extension_type in extension_types:
            writer.write_namespace_declaration(extension_type.prefix, extension_type.namespace)
