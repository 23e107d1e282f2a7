"""
pw_effects: Substance effect crawler

Builds a substance → effect map from two public sources:

    TripSit catalog → PsychonautWiki article match → PsychonautWiki effect relationships

Core constraints:
- One full pass per run, no caching between runs
- Bounded concurrency against the wiki search endpoint
- All-or-nothing output (a failed run writes no file)
"""

__version__ = "0.1.0"
