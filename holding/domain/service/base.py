"""Base service class for domain services."""

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


class Service:
    """Base class for all domain services.

    Domain services hold the business rules that span several entities.
    Collaborators are passed to the constructor; services never reach for
    a container or module-level state.
    """

    pass
