import pytest
import requests
from unittest.mock import Mock

from bis_client.adapters.requests_event_catalog import RequestsEventCatalogProvider
from bis_client.config import Settings
from bis_client.errors import CatalogRequestError

SETTINGS = Settings(base_url="https://bis.example.org/api", events_path="frontend/events/", timeout=3.0)


def make_provider(response=None, error=None):
    session = Mock()
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return RequestsEventCatalogProvider(settings=SETTINGS, session=session), session


def test_list_events_sends_flattened_params():
    response = Mock()
    response.json.return_value = [{"id": 1}]
    provider, session = make_provider(response)

    params = {"ordering": "date_to", "program_array": ""}
    result = provider.list_events(params)

    assert result == [{"id": 1}]
    session.get.assert_called_once_with(
        "https://bis.example.org/api/frontend/events/", params=params, timeout=3.0
    )
    response.raise_for_status.assert_called_once()


def test_list_events_unwraps_results_envelope():
    response = Mock()
    response.json.return_value = {"count": 2, "results": [{"id": 1}, {"id": 2}]}
    provider, _ = make_provider(response)

    assert provider.list_events({}) == [{"id": 1}, {"id": 2}]


def test_http_error_is_wrapped():
    response = Mock()
    response.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
    provider, _ = make_provider(response)

    with pytest.raises(CatalogRequestError) as exc:
        provider.list_events({})
    assert exc.value.code == "CATALOG_HTTP_ERROR"


def test_connection_error_is_wrapped():
    provider, _ = make_provider(error=requests.ConnectionError("refused"))

    with pytest.raises(CatalogRequestError) as exc:
        provider.list_events({})
    assert exc.value.code == "CATALOG_HTTP_ERROR"
    assert "refused" in exc.value.message


def test_invalid_json_is_wrapped():
    response = Mock()
    response.json.side_effect = ValueError("Expecting value")
    provider, _ = make_provider(response)

    with pytest.raises(CatalogRequestError) as exc:
        provider.list_events({})
    assert exc.value.code == "CATALOG_DECODE_ERROR"


def test_close_closes_session():
    provider, session = make_provider(Mock())
    provider.close()
    session.close.assert_called_once()


def test_successful_request_is_counted():
    from prometheus_client import REGISTRY

    before = REGISTRY.get_sample_value("bis_client_requests_total", {"outcome": "ok"}) or 0.0
    response = Mock()
    response.json.return_value = []
    provider, _ = make_provider(response)
    provider.list_events({})
    after = REGISTRY.get_sample_value("bis_client_requests_total", {"outcome": "ok"})
    assert after == before + 1


@pytest.mark.parametrize("body", [
    {"detail": "maintenance"},
    {"results": None},
    None,
    "oops",
    42,
    [1],
    [{"id": 1}, "x"],
])
def test_unexpected_body_shape_is_decode_error(body):
    response = Mock()
    response.json.return_value = body
    provider, _ = make_provider(response)

    with pytest.raises(CatalogRequestError) as exc:
        provider.list_events({})
    assert exc.value.code == "CATALOG_DECODE_ERROR"


def test_empty_results_envelope_is_accepted():
    response = Mock()
    response.json.return_value = {"count": 0, "results": []}
    provider, _ = make_provider(response)

    assert provider.list_events({}) == []
