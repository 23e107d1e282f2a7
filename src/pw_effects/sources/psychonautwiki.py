"""
PsychonautWiki client.

Two endpoints of the same MediaWiki API:
- opensearch: resolve a free-text name to an article title
- ask (Semantic MediaWiki): list the effects linked to an article via the
  "Effect" property, queried in reverse ([[-Effect::<name>]])
"""

import logging
from collections.abc import Mapping

import httpx

from pw_effects.errors import SourceUnavailableError
from pw_effects.schemas import EffectQueryResult, MatchResult
from pw_effects.sources.base import BaseClient

logger = logging.getLogger(__name__)

# Main article namespace
ARTICLE_NAMESPACE = 0
EFFECT_PROPERTY = "Effect"


class PsychonautWikiClient(BaseClient):
    """Search articles and query effect relationships on PsychonautWiki."""

    source_key = "psychonautwiki"

    def __init__(self, client: httpx.AsyncClient, api_url: str):
        super().__init__(client)
        self.api_url = api_url

    async def search_article(self, name: str) -> MatchResult:
        """
        Look up the best article match for a name.

        Args:
            name: Free-text substance name

        Returns:
            MatchResult with the term echoed by the service and the matched titles
        """
        body = await self.fetch_json(
            self.api_url,
            params={
                "action": "opensearch",
                "search": name,
                "limit": 1,
                "namespace": ARTICLE_NAMESPACE,
                "format": "json",
            },
        )
        # [term, [titles], [descriptions], [urls]]
        if not isinstance(body, list) or len(body) < 2 or not isinstance(body[1], list):
            raise SourceUnavailableError(f"{self.source_key}: unexpected opensearch response for {name!r}")

        term, matches = body[0], body[1]
        logger.debug("opensearch %r -> %s", name, matches)
        return MatchResult(term=str(term), matches=matches)

    async def query_relationships(self, name: str) -> EffectQueryResult:
        """
        Query the articles linked to a substance through the effect property.

        Args:
            name: Matched substance name

        Returns:
            EffectQueryResult pairing the name with the "query" object of the response
        """
        body = await self.fetch_json(
            self.api_url,
            params={
                "action": "ask",
                "format": "json",
                "query": f"[[-{EFFECT_PROPERTY}::{name}]]",
            },
        )
        if not isinstance(body, Mapping):
            raise SourceUnavailableError(f"{self.source_key}: unexpected ask response for {name!r}")

        query = body.get("query")
        return EffectQueryResult(name=name, query=dict(query) if isinstance(query, Mapping) else {})
