"""Error taxonomy for document ingestion.

All of these are recoverable: adapters and the ingestion layer catch them at
their boundary, log a diagnostic and carry on with whatever is still usable.
"""

from __future__ import annotations


class GameReconError(Exception):
    """Base class for gamerecon errors."""


class IngestError(GameReconError, ValueError):
    """Raised when an upstream document cannot be (fully) ingested."""


class MalformedDocumentError(IngestError):
    """The expected top-level array field is missing or has the wrong type."""


class MalformedElementError(IngestError):
    """A single record inside an otherwise valid document is unusable."""


class UnparsableInputError(IngestError):
    """Raw input is not valid JSON."""
