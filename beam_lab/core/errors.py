# beam_lab/core/errors.py
from __future__ import annotations


class BeamSearchError(Exception):
    """Base class for everything the searches raise on their own."""


class InvalidArgumentError(BeamSearchError, ValueError):
    """Missing input, or source/target not in the graph. Raised before searching."""


class PathNotFoundError(BeamSearchError, LookupError):
    def __init__(self, source, target, message: str | None = None):
        self.source = source
        self.target = target
        super().__init__(message or f"Path from {source!r} to {target!r} not found.")


class SearchLimitError(BeamSearchError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Search aborted after {limit} expansions.")
