"""
Extensible syndication entity framework.

Entities from every supported format share one extension slot, one
comparison engine and one load/save pipeline.

Subpackages:
- common: codecs, comparison, dates, XML primitives, settings
- extensions: extension contract, adapter and bundled extensions
- data: format detection and structural adapters
- net: asynchronous network loading
- specialized: BlogML 2.0 and APML 0.6 entities
"""

from syndication.errors import (
    InvalidArgumentError,
    LoadInProgressError,
    OutOfRangeError,
    SyndicationError,
    SyndicationFormatError,
)

__all__ = [
    "InvalidArgumentError",
    "LoadInProgressError",
    "OutOfRangeError",
    "SyndicationError",
    "SyndicationFormatError",
]
