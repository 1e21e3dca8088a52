from .domain.enums import EventFilter, EventType, Ordering, Program, TargetGroup
from .errors import BisClientError, CatalogRequestError, InvalidArgumentError, UsageError
from .request.event_parameters import EventQueryBuilder
from .response.program import ProgramValue

__all__ = [
    "BisClientError",
    "CatalogRequestError",
    "EventFilter",
    "EventQueryBuilder",
    "EventType",
    "InvalidArgumentError",
    "Ordering",
    "Program",
    "ProgramValue",
    "TargetGroup",
    "UsageError",
]
