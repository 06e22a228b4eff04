from __future__ import annotations

import pytest
import requests

from tests.helpers.helper_http import FakeResponse, FakeSession, dry_run_reply
from tests.helpers.helper_token import TOKEN_ID
from token_quantity.platform.ao.ao_config import AoConfig, load_ao_config
from token_quantity.platform.ao.dry_run_client import DRY_RUN_ID, DRY_RUN_OWNER, DryRunClient, DryRunError
from token_quantity.utils.ao_tools import make_tags

CONFIG = AoConfig(cu_url="https://cu.example.com/", connect_timeout=1, read_timeout=2)


def test_dry_run_request_shape() -> None:
    session = FakeSession(dry_run_reply({"Data": "hello", "Tags": []}))
    client = DryRunClient(CONFIG, session)

    messages = client.dry_run(TOKEN_ID, make_tags(Action="Info"))

    assert messages == [{"Data": "hello", "Tags": []}]
    request = session.requests[0]
    assert request["url"] == "https://cu.example.com/dry-run"
    assert request["params"] == {"process-id": TOKEN_ID}
    assert request["timeout"] == (1, 2)
    assert request["json"] == {
        "Id": DRY_RUN_ID,
        "Owner": DRY_RUN_OWNER,
        "Target": TOKEN_ID,
        "Tags": [{"name": "Action", "value": "Info"}],
        "Data": "",
    }


def test_dry_run_without_messages() -> None:
    client = DryRunClient(CONFIG, FakeSession(FakeResponse({"Output": ""})))
    assert client.dry_run(TOKEN_ID, []) == []


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(status_code=500),
        FakeResponse(status_code=404),
        FakeResponse(invalid_json=True),
        FakeResponse(["not", "an", "object"]),
        FakeResponse({"Error": "Process not found", "Messages": []}),
    ],
)
def test_dry_run_failures(response: FakeResponse) -> None:
    client = DryRunClient(CONFIG, FakeSession(response))
    with pytest.raises(DryRunError):
        client.dry_run(TOKEN_ID, make_tags(Action="Info"))


def test_dry_run_transport_error_is_chained() -> None:
    client = DryRunClient(CONFIG, FakeSession(requests.ConnectionError("connection refused")))

    with pytest.raises(DryRunError) as exc_info:
        client.dry_run(TOKEN_ID, [])

    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
    assert exc_info.value.process_id == TOKEN_ID


def test_config_strips_trailing_slash() -> None:
    assert CONFIG.cu_url == "https://cu.example.com"


def test_config_validation() -> None:
    with pytest.raises(ValueError):
        AoConfig(cu_url="cu.example.com")
    with pytest.raises(ValueError):
        AoConfig(read_timeout=0)


def test_load_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AO_CU_URL", "http://localhost:6363")
    monkeypatch.setenv("AO_CONNECT_TIMEOUT", "2.5")
    monkeypatch.setenv("AO_READ_TIMEOUT", "10")

    config = load_ao_config()

    assert config.cu_url == "http://localhost:6363"
    assert config.connect_timeout == 2.5
    assert config.read_timeout == 10.0


def test_load_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("token_quantity.platform.ao.ao_config.load_dotenv", lambda: False)
    for name in ("AO_CU_URL", "AO_CONNECT_TIMEOUT", "AO_READ_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    assert load_ao_config() == AoConfig()
