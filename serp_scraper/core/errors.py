"""Exceptions raised by search sessions and their collaborators."""


class SearchSessionError(Exception):
    """Base class for all scraper errors."""


class LaunchFailure(SearchSessionError):
    """The browser engine could not be started or closed."""


class InvalidQuery(SearchSessionError, ValueError):
    """The query is empty or whitespace only."""


class NotInitialized(SearchSessionError):
    """An operation needs a browser instance but init() has not succeeded."""


class NotOnSearchPage(SearchSessionError):
    """Results were requested before a search completed."""


class ScrollError(SearchSessionError):
    """Reading the page failed while waiting for results to load."""
