import json
from typing import Optional
from urllib.parse import urlparse

import pytest
from stellar_sdk import Keypair
from stellar_sdk.client.base_sync_client import BaseSyncClient
from stellar_sdk.client.response import Response
from stellar_sdk.exceptions import ConnectionError as SdkConnectionError

from lumenpipe.client import LumenClient
from lumenpipe.config_reader import LiveNetwork, Settings, SimulatedNetwork
from lumenpipe.infrastructure.services.horizon_transport import HorizonTransport
from lumenpipe.infrastructure.services.simulated_transport import SimulatedTransport

TEST_HORIZON_URL = "https://horizon.lumenpipe.test"
TEST_PASSPHRASE = "Test SDF Network ; September 2015"


class FakeHorizonClient(BaseSyncClient):
    """
    Stands in for the HTTP client of stellar_sdk.Server.

    Usage in tests:
        fake_horizon.set_account("GXXX", balances=[...])
        fake_horizon.set_rejection("tx_failed", ["op_underfunded"])
        assert fake_horizon.get_requests("transactions") == [...]
    """

    def __init__(self):
        self.requests = []
        self.accounts = {}
        self.offline = False
        self.submit_status = 200
        self.submit_body = {"hash": "abc123", "ledger": 12345, "successful": True, "result_xdr": "AAAA"}

    def set_account(self, account_id: str, balances: Optional[list] = None, sequence: str = "123456789",
                    signers: Optional[list] = None, thresholds: Optional[dict] = None):
        self.accounts[account_id] = {
            "id": account_id,
            "account_id": account_id,
            "sequence": sequence,
            "balances": balances or [
                {"asset_type": "native", "balance": "100.0000000"}
            ],
            "signers": signers or [
                {"key": account_id, "weight": 1, "type": "ed25519_public_key"}
            ],
            "thresholds": thresholds or {"low_threshold": 0, "med_threshold": 0, "high_threshold": 0},
            "data": {},
            "flags": {"auth_required": False, "auth_revocable": False, "auth_immutable": False},
        }

    def set_rejection(self, tx_code: str, op_codes: Optional[list] = None):
        self.submit_status = 400
        result_codes = {"transaction": tx_code}
        if op_codes:
            result_codes["operations"] = op_codes
        self.submit_body = {
            "type": "https://stellar.org/horizon-errors/transaction_failed",
            "title": "Transaction Failed",
            "status": 400,
            "detail": "The transaction failed when submitted to the stellar network.",
            "extras": {
                "envelope_xdr": "AAAA...",
                "result_codes": result_codes,
                "result_xdr": "AAAAAAAAAGT/////AAAAAQAAAAAAAAAB////+gAAAAA=",
            },
        }

    def get_requests(self, endpoint: Optional[str] = None):
        if endpoint:
            return [r for r in self.requests if r["endpoint"] == endpoint]
        return self.requests

    def _record(self, method: str, url: str, data=None):
        if self.offline:
            raise SdkConnectionError("connection refused")
        parts = urlparse(url).path.strip("/").split("/")
        request = {"endpoint": parts[0], "method": method}
        if len(parts) > 1:
            request["id"] = parts[1]
        if data is not None:
            request["data"] = dict(data)
        self.requests.append(request)
        return request

    def get(self, url: str, params=None) -> Response:
        request = self._record("GET", url)
        if request["endpoint"] == "accounts" and request.get("id") in self.accounts:
            return Response(200, json.dumps(self.accounts[request["id"]]), {}, url)
        body = {"type": "https://stellar.org/horizon-errors/not_found", "title": "Resource Missing",
                "status": 404, "detail": "The resource at the url requested was not found."}
        return Response(404, json.dumps(body), {}, url)

    def post(self, url: str, data=None, json_data=None) -> Response:
        self._record("POST", url, data)
        return Response(self.submit_status, json.dumps(self.submit_body), {}, url)

    def stream(self, url: str, params=None):
        raise NotImplementedError

    def close(self):
        pass


@pytest.fixture
def fake_horizon():
    return FakeHorizonClient()


@pytest.fixture
def horizon_transport(fake_horizon):
    return HorizonTransport(horizon_url=TEST_HORIZON_URL, client=fake_horizon)


@pytest.fixture
def test_settings():
    return Settings(network="test", base_fee=100, tx_timeout=180)


@pytest.fixture
def live_client(horizon_transport, test_settings):
    network = LiveNetwork(horizon_url=TEST_HORIZON_URL, passphrase=TEST_PASSPHRASE)
    return LumenClient(network, settings=test_settings, transport=horizon_transport)


@pytest.fixture
def simulated_transport():
    return SimulatedTransport()


@pytest.fixture
def fake_client(simulated_transport, test_settings):
    return LumenClient(SimulatedNetwork(), settings=test_settings, transport=simulated_transport)


@pytest.fixture
def kp_a():
    return Keypair.random()


@pytest.fixture
def kp_b():
    return Keypair.random()


@pytest.fixture
def kp_c():
    return Keypair.random()
