"""
Pluggable, namespace-scoped extensions.

Exports the extension contract, the extensible-entity trait, the adapter
and the bundled extensions.
"""

from syndication.extensions.adapter import ExtensionAdapter
from syndication.extensions.base import ExtensibleObject, SyndicationExtension
from syndication.extensions.slash import SlashSyndicationExtension
from syndication.extensions.wfw import WellFormedWebCommentsSyndicationExtension

__all__ = [
    "ExtensibleObject",
    "ExtensionAdapter",
    "SlashSyndicationExtension",
    "SyndicationExtension",
    "WellFormedWebCommentsSyndicationExtension",
]
