"""
Bidirectional mapping between enum variants and their wire tokens.

Each enum that appears in XML gets one static table, built at import
time next to the enum definition:

    APPROVAL_STATUS = EnumerationCodec(
        BlogMLApprovalStatus,
        [
            (BlogMLApprovalStatus.NONE, "", ""),
            (BlogMLApprovalStatus.APPROVED, "true", "Approved"),
            (BlogMLApprovalStatus.NOT_APPROVED, "false", "Not Approved"),
        ],
        unspecified=BlogMLApprovalStatus.NONE,
    )

Unknown tokens decode to the unspecified variant instead of raising, so
a bad enum attribute in a document is skipped like any other optional field.
"""

from enum import Enum
from typing import Generic, Iterable, Optional, TypeVar

from syndication.errors import InvalidArgumentError

E = TypeVar("E", bound=Enum)


class EnumerationCodec(Generic[E]):
    """
    Static (variant, wire-token, display-name) table for one enum type.

    The table must be total (every variant mapped) and injective on the
    wire token, compared case-insensitively. Both are checked once at
    construction.
    """

    def __init__(
        self,
        enum_type: type[E],
        table: Iterable[tuple[E, str, str]],
        unspecified: E,
    ):
        self.enum_type = enum_type
        self.unspecified = unspecified
        self._tokens: dict[E, str] = {}
        self._display_names: dict[E, str] = {}
        self._by_token: dict[str, E] = {}

        for variant, token, display_name in table:
            if not isinstance(variant, enum_type):
                raise InvalidArgumentError(
                    f"{variant!r} is not a member of {enum_type.__name__}"
                )
            key = token.casefold()
            if key in self._by_token:
                raise InvalidArgumentError(
                    f"Wire token {token!r} is mapped twice in {enum_type.__name__}"
                )
            self._tokens[variant] = token
            self._display_names[variant] = display_name
            self._by_token[key] = variant

        missing = [member.name for member in enum_type if member not in self._tokens]
        if missing:
            raise InvalidArgumentError(
                f"{enum_type.__name__} codec is missing variants: {', '.join(missing)}"
            )

    def to_wire(self, variant: E) -> str:
        return self._tokens[variant]

    def from_wire(self, token: Optional[str]) -> E:
        """Decode a token; empty or unrecognized tokens yield the unspecified variant."""
        if not token:
            return self.unspecified
        return self._by_token.get(token.strip().casefold(), self.unspecified)

    def display_name(self, variant: E) -> str:
        return self._display_names[variant]
