"""APML 0.6 namespace constants."""

from typing import Optional

from syndication.common.xml import create_namespace_map as _create_namespace_map

APML_NAMESPACE = "http://www.apml.org/apml-0.6"
APML_PREFIX = "apml"
APML_VERSION = "0.6"


def create_namespace_map(default_namespace: Optional[str] = None) -> dict[str, str]:
    """Prefix map for selecting APML elements ("apml:Profile", ...)."""
    return _create_namespace_map(APML_PREFIX, APML_NAMESPACE, default_namespace)
