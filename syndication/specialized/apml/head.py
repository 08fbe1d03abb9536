"""APML head: descriptive metadata about the attention profile."""

from datetime import datetime
from typing import Optional

from syndication.common.comparison import ComparableEntity, compare_sequence, compare_text, compare_values
from syndication.common.dates import DATETIME_UNSET, format_datetime, is_unset, try_parse_datetime
from syndication.common.guard import argument_not_none, normalize_text
from syndication.common.settings import LoadSettings
from syndication.common.xml import XmlNavigator, XmlWriter, canonical_xml
from syndication.extensions.adapter import ExtensionAdapter
from syndication.extensions.base import ExtensibleObject
from syndication.specialized.apml.utility import APML_NAMESPACE, APML_PREFIX, create_namespace_map


class ApmlHead(ExtensibleObject, ComparableEntity):
    """Title, generator, owner e-mail and creation date of an APML document."""

    def __init__(self):
        super().__init__()
        self._title = ""
        self._generator = ""
        self._email_address = ""
        self.created_on: datetime = DATETIME_UNSET

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: Optional[str]) -> None:
        self._title = normalize_text(value)

    @property
    def generator(self) -> str:
        return self._generator

    @generator.setter
    def generator(self, value: Optional[str]) -> None:
        self._generator = normalize_text(value)

    @property
    def email_address(self) -> str:
        return self._email_address

    @email_address.setter
    def email_address(self, value: Optional[str]) -> None:
        self._email_address = normalize_text(value)

    def load(self, navigator: XmlNavigator, settings: Optional[LoadSettings] = None) -> bool:
        argument_not_none(navigator, "navigator")
        namespaces = create_namespace_map()
        loaded = False

        title = navigator.select_single("apml:Title", namespaces)
        generator = navigator.select_single("apml:Generator", namespaces)
        email = navigator.select_single("apml:UserEmail", namespaces)
        created = navigator.select_single("apml:DateCreated", namespaces)

        if title is not None and title.value.strip():
            self.title = title.value
            loaded = True
        if generator is not None and generator.value.strip():
            self.generator = generator.value
            loaded = True
        if email is not None and email.value.strip():
            self.email_address = email.value
            loaded = True
        if created is not None:
            created_on = try_parse_datetime(created.value)
            if created_on is not None:
                self.created_on = created_on
                loaded = True

        if settings is not None:
            ExtensionAdapter.fill(self, navigator, settings, APML_NAMESPACE)
        return loaded

    def write_to(self, writer: XmlWriter) -> None:
        argument_not_none(writer, "writer")
        writer.start_element("Head", APML_NAMESPACE, APML_PREFIX)

        if self.title:
            writer.write_element_string("Title", self.title, APML_NAMESPACE, APML_PREFIX)
        if self.generator:
            writer.write_element_string("Generator", self.generator, APML_NAMESPACE, APML_PREFIX)
        if self.email_address:
            writer.write_element_string("UserEmail", self.email_address, APML_NAMESPACE, APML_PREFIX)
        if not is_unset(self.created_on):
            writer.write_element_string(
                "DateCreated", format_datetime(self.created_on), APML_NAMESPACE, APML_PREFIX
            )

        ExtensionAdapter.write_extensions_to(self.extensions, writer)
        writer.end_element()

    def to_xml(self) -> str:
        return canonical_xml(self.write_to)

    def _comparison_results(self, other: "ApmlHead"):
        yield compare_values(self.created_on, other.created_on)
        yield compare_text(self.email_address, other.email_address)
        yield compare_text(self.generator, other.generator)
        yield compare_text(self.title, other.title)
        yield compare_sequence(self.extensions, other.extensions)
