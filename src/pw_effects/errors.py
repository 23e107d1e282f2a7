"""
Exception taxonomy for the crawler.

Every error raised by the pipeline derives from CrawlerError so the CLI can
report it as a single failure class. None of them are recovered from inside
the pipeline.
"""


class CrawlerError(Exception):
    """Base class for all crawler failures."""


class SourceUnavailableError(CrawlerError):
    """An upstream service could not be reached or returned unusable data."""


class InvalidCatalogError(CrawlerError):
    """The substance catalog is malformed or empty."""


class EmptyInputError(CrawlerError):
    """A stage was given no names to work on."""


class ResolutionError(CrawlerError):
    """A name-to-article lookup failed."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class ExtractionError(CrawlerError):
    """An effect relationship query failed."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name
