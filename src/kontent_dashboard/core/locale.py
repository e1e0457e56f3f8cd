"""Resolution of the language codename used for variant operations."""

from __future__ import annotations

import logging

from kontent_dashboard.core.ports.management import ManagementApi
from kontent_dashboard.core.session import Session
from kontent_dashboard.errors import KontentError, LocaleResolutionError
from kontent_dashboard.models import Language

logger = logging.getLogger(__name__)

PROBE_CODENAMES = ("en-US", "en", "default", "en-GB", "en-CA", "en-AU", "es-ES", "fr-FR", "de-DE")
_ENGLISH_CODENAMES = {"en-us", "en"}


def pick_language(languages: list[Language]) -> Language | None:
    """Prefer an active English language, else the first one listed."""
    if not languages:
        return None
    active = [lang for lang in languages if lang.is_active] or languages
    for lang in active:
        if lang.codename.lower() in _ENGLISH_CODENAMES or "english" in lang.name.lower():
            return lang
    return active[0]


class LocaleResolver:
    def __init__(self, api: ManagementApi, session: Session) -> None:
        self._api = api
        self._session = session

    @property
    def cached(self) -> str | None:
        return self._session.language_codename

    def override(self, codename: str | None) -> None:
        logger.info("Language codename overridden to %s", codename)
        self._session.override_language(codename)

    async def resolve(self) -> str:
        """Return the session language codename, resolving and caching it on first use.

        Degrades from the configured languages list, to the variants of a sample
        item, to probing common codenames against that item.
        """
        if self._session.language_codename:
            return self._session.language_codename

        last_error: Exception | None = None

        try:
            chosen = pick_language(await self._api.list_languages())
        except KontentError as exc:
            logger.warning("Listing languages failed: %s", exc)
            last_error = exc
            chosen = None
        if chosen is not None:
            return self._remember(chosen.codename, "languages list")

        try:
            sample = await self._sample_item_id()
        except KontentError as exc:
            logger.warning("Could not load a sample item for language detection: %s", exc)
            raise LocaleResolutionError(f"Could not resolve a language codename: {exc}") from exc
        if sample is None:
            message = str(last_error) if last_error else "no languages and no content items available"
            raise LocaleResolutionError(f"Could not resolve a language codename: {message}")

        try:
            for variant in await self._api.list_variants(sample):
                if variant.language_codename:
                    return self._remember(variant.language_codename, f"variant of item {sample}")
        except KontentError as exc:
            logger.warning("Listing variants of %s failed: %s", sample, exc)
            last_error = exc

        for candidate in PROBE_CODENAMES:
            try:
                await self._api.get_variant(sample, candidate)
            except KontentError as exc:
                logger.debug("Probe %s on item %s failed: %s", candidate, sample, exc)
                last_error = exc
                continue
            return self._remember(candidate, f"probe on item {sample}")

        message = str(last_error) if last_error else "no candidate codename matched"
        raise LocaleResolutionError(f"Could not resolve a language codename: {message}")

    async def _sample_item_id(self) -> str | None:
        items = await self._api.list_items(limit=1)
        if not items:
            return None
        return str(items[0]["id"])

    def _remember(self, codename: str, source: str) -> str:
        logger.info("Resolved language codename %s from %s", codename, source)
        self._session.language_codename = codename
        return codename
