"""ApiRecordStore: HTTP payloads in, pydantic models out, RemoteFailure on errors."""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest
import requests

from app.core.store import RemoteFailure
from factories import tokyo
from ui import api_client
from ui.api_client import ApiRecordStore

pytestmark = pytest.mark.asyncio

FEEDING_JSON = {
    "id": 1,
    "feed_type_id": 2,
    "feeding_time": "2026-10-18T23:00:00Z",
    "consumed": None,
    "created_at": "2026-10-18T23:00:01Z",
    "feed_type": {
        "id": 2, "manufacturer": "Acme", "product_name": "Tuna", "created_at": "2026-01-01T00:00:00Z",
    },
}


def _response(payload=None, status=200) -> MagicMock:
    resp = MagicMock()
    resp.json.return_value = payload
    resp.content = b"" if payload is None else b"{}"
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    return resp


async def test_range_fetch_sends_utc_bounds_and_parses_models():
    with patch.object(api_client.requests, "get", return_value=_response([FEEDING_JSON])) as get:
        records = await ApiRecordStore().fetch_feeding_records_in_range(
            tokyo(2026, 9, 30, 0, 0), tokyo(2026, 11, 1, 23, 59, 59, 999999)
        )

    assert get.call_args.kwargs["params"] == {
        "start": "2026-09-29T15:00:00.000000+00:00",
        "end": "2026-11-01T14:59:59.999999+00:00",
    }
    assert records[0].feed_type.label == "Acme - Tuna"
    assert records[0].consumed is None


async def test_weight_window_is_sent_as_utc_dates():
    with patch.object(api_client.requests, "get", return_value=_response([])) as get:
        await ApiRecordStore().fetch_weight_records_in_range(
            tokyo(2026, 9, 30, 0, 0), tokyo(2026, 11, 1, 23, 59)
        )
    assert get.call_args.kwargs["params"] == {"start": "2026-09-29", "end": "2026-11-01"}


async def test_null_latest_unconsumed():
    with patch.object(api_client.requests, "get", return_value=_response(None)):
        assert await ApiRecordStore().fetch_latest_unconsumed_feeding_record() is None


async def test_consumption_payload_keeps_null():
    with patch.object(api_client.requests, "request", return_value=_response(FEEDING_JSON)) as request:
        await ApiRecordStore().update_feeding_consumption(1, None)
    assert request.call_args.kwargs["json"] == {"consumed": None}


async def test_http_error_becomes_remote_failure():
    with patch.object(api_client.requests, "post", return_value=_response({"detail": "bad"}, status=400)):
        with pytest.raises(RemoteFailure):
            await ApiRecordStore().create_weight_record(1, 4.2, date(2026, 10, 19))


async def test_connection_error_becomes_remote_failure():
    with patch.object(api_client.requests, "get", side_effect=requests.ConnectionError("refused")):
        with pytest.raises(RemoteFailure):
            await ApiRecordStore().fetch_all_pets()


async def test_delete_accepts_empty_body():
    with patch.object(api_client.requests, "request", return_value=_response(None)) as request:
        assert await ApiRecordStore().delete_pet(3) is None
    assert request.call_args.args[:2] == ("DELETE", f"{api_client.API_BASE}/pets/3")
