"""
Per-call load and save settings.

Both models are frozen: an adapter call never mutates the settings it was
handed. Defaults come from the process-wide configuration in core.config.
"""

from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.config import settings as app_settings

MAX_TIMEOUT = timedelta(days=365)


def _default_timeout() -> timedelta:
    return timedelta(seconds=app_settings.load_timeout_seconds)


class LoadSettings(BaseModel):
    """
    Options that control how a resource is read.

    Attributes:
        character_encoding: Decoding to apply to raw bytes. The default
            encoding lets the XML parser honour the document's own declaration.
        timeout: Upper bound on an asynchronous fetch.
        recognized_extensions: Extension types to try, in registration order.
        retrieval_limit: Cap on top-level items loaded (0 = unlimited).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    character_encoding: str = Field(default_factory=lambda: app_settings.default_character_encoding)
    timeout: timedelta = Field(default_factory=_default_timeout)
    recognized_extensions: tuple[type, ...] = ()
    retrieval_limit: int = Field(default_factory=lambda: app_settings.retrieval_limit, ge=0)

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, value: timedelta) -> timedelta:
        if value < timedelta(0) or value > MAX_TIMEOUT:
            raise ValueError("timeout must be between 0 and 365 days")
        return value

    @field_validator("recognized_extensions", mode="before")
    @classmethod
    def _check_extensions(cls, value: Any) -> tuple[type, ...]:
        return _extension_types(value)

    @property
    def uses_default_encoding(self) -> bool:
        return self.character_encoding.lower().replace("_", "-") == (
            app_settings.default_character_encoding.lower().replace("_", "-")
        )

    def with_extensions(self, *extension_types: type) -> "LoadSettings":
        """Copy with extra recognized extension types appended."""
        merged = list(self.recognized_extensions)
        merged.extend(t for t in extension_types if t not in merged)
        return self.model_copy(update={"recognized_extensions": tuple(merged)})


class SaveSettings(BaseModel):
    """
    Options that control how a resource is written.

    Attributes:
        character_encoding: Encoding named in the XML declaration.
        minimize_output: Skip indentation.
        auto_detect_extensions: Walk the graph for extension types before writing.
        supported_extensions: Extension types always declared on the root.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    character_encoding: str = Field(default_factory=lambda: app_settings.default_character_encoding)
    minimize_output: bool = Field(default_factory=lambda: app_settings.minimize_output)
    auto_detect_extensions: bool = Field(default_factory=lambda: app_settings.auto_detect_extensions)
    supported_extensions: tuple[type, ...] = ()

    @field_validator("supported_extensions", mode="before")
    @classmethod
    def _check_extensions(cls, value: Any) -> tuple[type, ...]:
        return _extension_types(value)


def _extension_types(value: Any) -> tuple[type, ...]:
    # Local import: extensions.base depends on the xml helpers in this package.
    from syndication.extensions.base import SyndicationExtension

    if value is None:
        return ()
    result = []
    for item in value:
        if item is None:
            raise ValueError("extension types must not contain None")
        if not (isinstance(item, type) and issubclass(item, SyndicationExtension)):
            raise ValueError(f"{item!r} is not a SyndicationExtension type")
        if item not in result:
            result.append(item)
    return tuple(result)
