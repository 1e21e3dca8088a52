"""Query parameters for the event catalog search endpoint.

The builder front-loads all validation into its setters; ``flatten()`` only
serializes what was stored. A builder is meant for one request-construction
flow and must not be shared between threads without external locking.
"""
from __future__ import annotations
from datetime import datetime
import logging
from typing import Callable, Dict, Iterable, List, Optional, Type, TypeVar, Union
from collections.abc import Iterable as IterableABC

from ..domain.enums import EventFilter, EventType, Ordering, Program, TargetGroup
from ..errors import UsageError

logger = logging.getLogger(__name__)

_FILTER_SEGMENTS = {
    EventFilter.CLUB: "klub",
    EventFilter.WEEKEND: "vik",
    EventFilter.CAMP: "tabor",
    EventFilter.EKOSTAN: "ekostan",
}

# Only weekend may be combined, and only with camp or ekostan.
ALLOWED_FILTERS: Dict[int, str] = {
    **{int(flag): segment for flag, segment in _FILTER_SEGMENTS.items()},
    int(EventFilter.WEEKEND | EventFilter.CAMP): _FILTER_SEGMENTS[EventFilter.WEEKEND] + _FILTER_SEGMENTS[EventFilter.CAMP],
    int(EventFilter.WEEKEND | EventFilter.EKOSTAN): _FILTER_SEGMENTS[EventFilter.WEEKEND] + _FILTER_SEGMENTS[EventFilter.EKOSTAN],
}

T = TypeVar("T", EventType, Program, TargetGroup)


def resolve_filter(value: int) -> str:
    """Map a preset flag (or allowed flag combination) to its API token."""
    if isinstance(value, int) and value in ALLOWED_FILTERS:
        return ALLOWED_FILTERS[value]
    raise UsageError(
        "INVALID_FILTER",
        f"Value `{int(value) if isinstance(value, int) else value}` is not of valid types and their "
        "combinations for `filter` parameter. Only `weekend+camp` and `weekend+ekostan` can be combined.",
    )


def _coerce(enum_cls: Type[T], items: Iterable[Union[T, str]]) -> List[T]:
    # a lone token (enum members are str too) is a one-item sequence, not characters
    if isinstance(items, str):
        items = [items]
    out: List[T] = []
    for item in items:
        try:
            out.append(enum_cls(item))
        except ValueError:
            raise UsageError("INVALID_TOKEN", f"`{item}` is not a valid {enum_cls.__name__}") from None
    return out


def _unit_ids(unit_ids: Union[int, Iterable[int]]) -> List[int]:
    if isinstance(unit_ids, (str, bytes)) or not isinstance(unit_ids, (int, IterableABC)):
        raise UsageError("INVALID_TOKEN", f"`{unit_ids!r}` is not a unit id or a list of unit ids")
    ids = [unit_ids] if isinstance(unit_ids, int) else list(unit_ids)
    for unit_id in ids:
        # bool is an int subclass but never a unit id
        if isinstance(unit_id, bool) or not isinstance(unit_id, int):
            raise UsageError("INVALID_TOKEN", f"`{unit_id!r}` is not a valid unit id")
    return ids


class EventQueryBuilder:
    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or datetime.now
        self._filter: Optional[str] = None
        self._types: List[EventType] = []
        self._programs: List[Program] = []
        self._target_groups: List[TargetGroup] = []
        self._organized_by: List[int] = []
        self._date_from_greater_than: Optional[datetime] = None
        self.order_by_date_to()

    # filter

    def set_filter_preset(self, value: int) -> "EventQueryBuilder":
        """Select a server-side preset filter.

        Presets cover unions the other parameters cannot express, e.g. all
        events of one type *or* of one program. Flags may be combined with
        ``|``, but only ``WEEKEND | CAMP`` and ``WEEKEND | EKOSTAN`` are
        accepted by the API.
        """
        self._filter = resolve_filter(value)
        logger.debug("filter preset %r resolved to %s", value, self._filter)
        return self

    @property
    def filter_preset(self) -> Optional[str]:
        return self._filter

    # type

    def set_event_type(self, event_type: Union[EventType, str]) -> "EventQueryBuilder":
        return self.set_event_types([event_type])

    def set_event_types(self, event_types: Iterable[Union[EventType, str]]) -> "EventQueryBuilder":
        self._types = _coerce(EventType, event_types)
        return self

    @property
    def event_types(self) -> List[EventType]:
        return list(self._types)

    # program

    def set_program(self, program: Union[Program, str]) -> "EventQueryBuilder":
        return self.set_programs([program])

    def set_programs(self, programs: Iterable[Union[Program, str]]) -> "EventQueryBuilder":
        self._programs = _coerce(Program, programs)
        return self

    @property
    def programs(self) -> List[Program]:
        return list(self._programs)

    # target group

    def set_target_group(self, target_group: Union[TargetGroup, str]) -> "EventQueryBuilder":
        return self.set_target_groups([target_group])

    def set_target_groups(self, target_groups: Iterable[Union[TargetGroup, str]]) -> "EventQueryBuilder":
        self._target_groups = _coerce(TargetGroup, target_groups)
        return self

    @property
    def target_groups(self) -> List[TargetGroup]:
        return list(self._target_groups)

    # miscellaneous

    def exclude_running(self) -> "EventQueryBuilder":
        """Exclude events which already started but have not ended yet.

        Running events are included unless this is called.
        """
        self._date_from_greater_than = self.clock()
        return self

    @property
    def running_excluded_from(self) -> Optional[datetime]:
        return self._date_from_greater_than

    def order_by_date_from(self) -> "EventQueryBuilder":
        self.ordering = Ordering.DATE_FROM
        return self

    def order_by_date_to(self) -> "EventQueryBuilder":
        self.ordering = Ordering.DATE_TO
        return self

    def set_organized_by(self, unit_ids: Union[int, Iterable[int]]) -> "EventQueryBuilder":
        self._organized_by = _unit_ids(unit_ids)
        return self

    @property
    def organized_by(self) -> List[int]:
        return list(self._organized_by)

    def flatten(self) -> Dict[str, str]:
        params = {
            "event_type_array": ",".join(t.value for t in self._types),
            "program_array": ",".join(p.value for p in self._programs),
            "indended_for_array": ",".join(g.value for g in self._target_groups),
            "ordering": self.ordering.value,
            "administrative_unit": ",".join(str(u) for u in self._organized_by),
        }
        # TODO: emit the resolved filter preset once the API parameter name for it is confirmed.
        if self._date_from_greater_than is not None:
            params["date_from__gte"] = self._date_from_greater_than.strftime("%Y-%m-%d")
        return params
