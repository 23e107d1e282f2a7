"""
Upstream service clients.

- tripsit: substance catalog (names + aliases)
- psychonautwiki: article search and effect relationship queries
"""

from pw_effects.sources.base import BaseClient, build_http_client
from pw_effects.sources.psychonautwiki import PsychonautWikiClient
from pw_effects.sources.tripsit import TripSitClient

__all__ = ["BaseClient", "PsychonautWikiClient", "TripSitClient", "build_http_client"]
