"""Run-aborting errors. The CLI catches only ``EditionError``."""

from __future__ import annotations


class EditionError(Exception):
    """Any failure that stops today's edition from being printed."""


class FetchError(EditionError):
    """A source could not be fetched (transport, HTTP status, or JSON decode)."""

    def __init__(self, source: str, detail: str = "") -> None:
        self.source = source
        msg = f"Unable to retrieve {source} data"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class DecodeError(EditionError):
    """A well-formed JSON body did not match the expected response shape."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        super().__init__(f"Unexpected {source} response: {detail}")


class EmptyResultError(DecodeError):
    """A response decoded fine but held nothing to print."""


class PrintError(EditionError):
    """The print command failed."""
