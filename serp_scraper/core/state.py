from enum import Enum


class SessionState(Enum):
    """
    Lifecycle state of a search session.

    Attributes:
        UNINITIALIZED: No browser instance.
        READY: Browser instance exists, no page bound.
        SEARCH_ACTIVE: A page is bound and has completed at least one
            navigation + scroll convergence pass.
    """
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    SEARCH_ACTIVE = "search_active"
