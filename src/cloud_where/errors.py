"""Exceptions raised when region lookups cannot be satisfied."""

from __future__ import annotations

from typing import Iterable


class RegionNotFoundError(LookupError):
    """A region code (or codes) could not be resolved against the catalog.

    ``codes`` lists every unresolved code. ``partial`` is a ``RegionSet`` of
    whatever did resolve when several codes were requested at once, and is
    empty otherwise.
    """

    def __init__(self, message: str = "region not found", *, codes: Iterable[str] = (), partial=None) -> None:
        super().__init__(message)
        self.codes = list(codes)
        if partial is None:
            from .services.collection import RegionSet

            partial = RegionSet()
        self.partial = partial


class ProviderNotFoundError(RegionNotFoundError):
    """The code resolved, but not for the requested provider."""

    def __init__(self, provider: str, *, codes: Iterable[str] = ()) -> None:
        super().__init__(f"region not found: no region found for provider {provider}", codes=codes)
        self.provider = provider
