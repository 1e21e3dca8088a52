from __future__ import annotations
from typing import Protocol, Dict, Any, List


class EventCatalogProvider(Protocol):
    """Abstracts the remote event catalog for testability."""

    def list_events(self, params: Dict[str, str]) -> List[Dict[str, Any]]:
        """Return event records matching flattened query parameters."""
        ...
