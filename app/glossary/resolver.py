"""Glossary definitions from the free dictionary API."""

from typing import Any
from urllib.parse import quote

import httpx

from app.glossary.models import DefinitionLookup
from app.logging.logger import Log


def fallback_definition(term: str) -> str:
    return f"Definition not found for {term}"


class GlossaryResolver:
    """Looks up a definition for a single term. Never raises.

    Memoization across a document is the caller's job; the resolver itself
    performs one request per call.
    """

    def __init__(
        self,
        *,
        api_url: str,
        timeout_seconds: int = 10,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._http = http_client if http_client is not None else httpx.Client()

    def resolve(self, term: str) -> str:
        return self.lookup(term).definition

    def lookup(self, term: str) -> DefinitionLookup:
        if not term or not term.strip():
            return DefinitionLookup(term=term, definition=fallback_definition(term), found=False)

        try:
            response = self._http.get(
                f"{self._api_url}/{quote(term.strip(), safe='')}",
                timeout=self._timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            Log.debug(f"Dictionary has no entry for {term!r}: HTTP {exc.response.status_code}")
            return DefinitionLookup(term=term, definition=fallback_definition(term), found=False)
        except Exception as exc:
            Log.warning(f"Dictionary lookup for {term!r} failed: {type(exc).__name__}: {exc}")
            return DefinitionLookup(term=term, definition=fallback_definition(term), found=False)

        definition = self._first_definition(payload)
        if definition is None:
            return DefinitionLookup(term=term, definition=fallback_definition(term), found=False)
        return DefinitionLookup(term=term, definition=definition, found=True)

    @staticmethod
    def _first_definition(payload: Any) -> str | None:
        """First definition of the first meaning of the first entry, if present."""
        try:
            definition = payload[0]["meanings"][0]["definitions"][0]["definition"]
        except (LookupError, TypeError):
            return None
        if not isinstance(definition, str) or not definition.strip():
            return None
        return definition.strip()
