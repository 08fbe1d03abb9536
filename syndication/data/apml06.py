"""Structural adapter for APML 0.6 documents."""

from typing import Any

from core.logging import get_logger
from syndication.common.guard import argument_not_none
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter
from syndication.extensions.adapter import ExtensionAdapter
from syndication.specialized.apml.application import ApmlApplication
from syndication.specialized.apml.profile import ApmlProfile
from syndication.specialized.apml.utility import APML_NAMESPACE, APML_PREFIX, create_namespace_map

logger = get_logger(__name__)


class Apml06ResourceAdapter:
    """Fills an ApmlDocument from a navigator and writes one back out."""

    def __init__(self, navigator: XmlNavigator, settings: LoadSettings):
        argument_not_none(navigator, "navigator")
        argument_not_none(settings, "settings")
        self.navigator = navigator
        self.settings = settings

    def fill(self, document: Any) -> bool:
        argument_not_none(document, "document")
        namespaces = create_namespace_map()
        root = self.navigator.select_single("apml:APML", namespaces)
        if root is None:
            return False

        loaded = False
        head = root.select_single("apml:Head", namespaces)
        if head is not None and document.head.load(head, self.settings):
            loaded = True

        body = root.select_single("apml:Body", namespaces)
        if body is not None and self._fill_body(document, body, namespaces):
            loaded = True

        ExtensionAdapter.fill(document, root, self.settings, APML_NAMESPACE)
        return loaded or document.has_extensions

    def _fill_body(self, document: Any, body: XmlNavigator, namespaces: dict[str, str]) -> bool:
        loaded = False

        default_profile = body.get_attribute("defaultprofile")
        if default_profile:
            document.default_profile_name = default_profile
            loaded = True

        limit = self.settings.retrieval_limit
        for counter, child in enumerate(body.select("apml:Profile", namespaces), start=1):
            if limit and counter > limit:
                logger.debug("Retrieval limit reached", limit=limit)
                break
            profile = ApmlProfile()
            if profile.load(child, self.settings):
                document.profiles.append(profile)
                loaded = True

        for child in body.select("apml:Applications/apml:Application", namespaces):
            application = ApmlApplication()
            if application.load(child, self.settings):
                document.applications.append(application)
                loaded = True

        return loaded

    @staticmethod
    def write(document: Any, writer: XmlWriter, extension_types: list[type]) -> None:
        """Write the document; extension namespaces are declared before any child."""
        argument_not_none(document, "document")
        argument_not_none(writer, "writer")

        writer.start_element("APML", APML_NAMESPACE, APML_PREFIX)
        ExtensionAdapter.write_namespace_declarations(extension_types, writer)
        writer.write_attribute("version", document.version)

        document.head.write_to(writer)

        writer.start_element("Body", APML_NAMESPACE, APML_PREFIX)
        writer.write_attribute("defaultprofile", document.default_profile_name)
        for profile in document.profiles:
            profile.write_to(writer)
        if document.applications:
            writer.start_element("Applications", APML_NAMESPACE, APML_PREFIX)
            for application in document.applications:
                application.write_to(writer)
            writer.end_element()
        writer.end_element()

        ExtensionAdapter.write_extensions_to(document.extensions, writer)
        writer.end_element()
