"""APML 0.6 document: a user's attention profiles."""

from typing import ClassVar, Optional

from syndication.common.comparison import ComparableEntity, compare_nested, compare_sequence, compare_text
from syndication.common.guard import argument_not_none, normalize_text
from syndication.data.metadata import ContentFormat
from syndication.extensions.base import ExtensibleObject
from syndication.resource import SyndicationResource
from syndication.specialized.apml.application import ApmlApplication
from syndication.specialized.apml.head import ApmlHead
from syndication.specialized.apml.profile import ApmlProfile
from syndication.specialized.apml.utility import APML_VERSION


class ApmlDocument(SyndicationResource, ExtensibleObject, ComparableEntity):
    """
    Top-level APML resource.

    Usage:
        document = ApmlDocument()
        document.head.title = "Example APML file for apml.org"
        profile = ApmlProfile("Home")
        profile.explicit_concepts.append(ApmlConcept("attention", "0.99"))
        document.add_profile(profile, default=True)

        print(document.dumps())
    """

    format: ClassVar[ContentFormat] = ContentFormat.APML
    version: ClassVar[str] = APML_VERSION

    def __init__(self):
        super().__init__()
        self._head = ApmlHead()
        self._default_profile_name = ""
        self.profiles: list[ApmlProfile] = []
        self.applications: list[ApmlApplication] = []

    @property
    def head(self) -> ApmlHead:
        return self._head

    @head.setter
    def head(self, value: ApmlHead) -> None:
        argument_not_none(value, "head")
        self._head = value

    @property
    def default_profile_name(self) -> str:
        return self._default_profile_name

    @default_profile_name.setter
    def default_profile_name(self, value: Optional[str]) -> None:
        self._default_profile_name = normalize_text(value)

    @property
    def default_profile(self) -> Optional[ApmlProfile]:
        """Profile named by the Body's defaultprofile attribute, if present."""
        return self.find_profile(self.default_profile_name) if self.default_profile_name else None

    def find_profile(self, name: str) -> Optional[ApmlProfile]:
        """First profile whose name matches, ignoring case."""
        wanted = normalize_text(name).casefold()
        return next((p for p in self.profiles if p.name.casefold() == wanted), None)

    def add_profile(self, profile: ApmlProfile, default: bool = False) -> None:
        argument_not_none(profile, "profile")
        self.profiles.append(profile)
        if default:
            self.default_profile_name = profile.name

    def extensible_children(self):
        yield self.head
        yield from self.applications
        yield from self.profiles

    def _comparison_results(self, other: "ApmlDocument"):
        yield compare_sequence(self.applications, other.applications)
        yield compare_text(self.default_profile_name, other.default_profile_name)
        yield compare_nested(self.head, other.head)
        yield compare_sequence(self.profiles, other.profiles)
        yield compare_sequence(self.extensions, other.extensions)

    def __repr__(self) -> str:
        return f"<ApmlDocument {self.head.title!r} profiles={len(self.profiles)}>"
