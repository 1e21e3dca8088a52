import os, sys
from datetime import datetime
import pytest

# Ensure the repository root is importable without an editable install
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from bis_client.request.event_parameters import EventQueryBuilder  # noqa: E402

FIXED_NOW = datetime(2024, 3, 9, 23, 30)


@pytest.fixture(scope="function")
def builder():
    return EventQueryBuilder(clock=lambda: FIXED_NOW)
