"""BlogML 2.0 namespace constants."""

from typing import Optional

from syndication.common.xml import create_namespace_map as _create_namespace_map

BLOGML_NAMESPACE = "http://www.blogml.com/2006/09/BlogML"
BLOGML_PREFIX = "blog"
BLOGML_VERSION = "2.0"


def create_namespace_map(default_namespace: Optional[str] = None) -> dict[str, str]:
    """Prefix map for selecting BlogML elements ("blog:post", ...)."""
    return _create_namespace_map(BLOGML_PREFIX, BLOGML_NAMESPACE, default_namespace)
