"""
Exception taxonomy for the syndication framework.

Required-argument failures and malformed XML propagate immediately.
Optional fields (dates, URIs, enum tokens, numbers) never raise while
loading; they are skipped and left at their defaults.

Malformed XML is not wrapped: xml.etree.ElementTree.ParseError reaches
the caller unmodified.
"""


class SyndicationError(Exception):
    """Base exception for syndication operations."""
    pass


class InvalidArgumentError(SyndicationError, ValueError):
    """A required argument was None or empty."""
    pass


class OutOfRangeError(SyndicationError, ValueError):
    """A numeric value falls outside its closed domain."""
    pass


class SyndicationFormatError(SyndicationError):
    """The XML does not conform to the expected syndication vocabulary."""
    pass


class LoadInProgressError(SyndicationError, RuntimeError):
    """A second asynchronous load was attempted while one is in flight."""
    pass
