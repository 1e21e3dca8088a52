from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Any, List

from ..ports.event_catalog import EventCatalogProvider
from ..request.event_parameters import EventQueryBuilder
from ..response.program import ProgramValue


@dataclass
class FindEventsResult:
    events: List[Dict[str, Any]]
    programs: List[ProgramValue] = field(default_factory=list)


class FindEventsUseCase:
    def __init__(self, provider: EventCatalogProvider):
        self.provider = provider

    def execute(self, parameters: EventQueryBuilder) -> FindEventsResult:
        events = self.provider.list_events(parameters.flatten())
        programs = [
            ProgramValue.from_payload(ev["program"])
            for ev in events
            if isinstance(ev.get("program"), dict)
        ]
        return FindEventsResult(events=events, programs=programs)
