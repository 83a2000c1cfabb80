from typing import Optional

from loguru import logger
from pydantic import ValidationError
from stellar_sdk import Server, TransactionEnvelope
from stellar_sdk.client.base_sync_client import BaseSyncClient
from stellar_sdk.exceptions import BadRequestError, BaseHorizonError
from stellar_sdk.exceptions import ConnectionError as SdkConnectionError
from stellar_sdk.exceptions import NotFoundError as SdkNotFoundError

from lumenpipe.core.domain.entities import Account
from lumenpipe.core.domain.errors import NotFoundError, Rejection, RejectionError, SubmitError
from lumenpipe.core.domain.value_objects import SubmissionResult
from lumenpipe.core.interfaces.services import ILedgerTransport
from lumenpipe.infrastructure.schemas import HorizonAccount


def rejection_from_horizon(error: BaseHorizonError) -> Rejection:
    extras = error.extras or {}
    return Rejection.model_validate({
        "status": error.status or 400,
        "title": error.title or "",
        "detail": error.detail or "",
        "type": error.type or "",
        "result_codes": extras.get("result_codes") or {},
        "result_xdr": extras.get("result_xdr"),
        "envelope_xdr": extras.get("envelope_xdr"),
    })


class HorizonTransport(ILedgerTransport):
    def __init__(self, horizon_url: str, client: Optional[BaseSyncClient] = None):
        self.horizon_url = horizon_url
        self.server = Server(horizon_url=horizon_url, client=client)

    def load_account(self, address: str) -> Account:
        try:
            account_resp = self.server.accounts().account_id(address).call()
        except SdkNotFoundError as ex:
            raise NotFoundError(address) from ex
        except BaseHorizonError as ex:
            raise SubmitError(f"Horizon error loading account {address}: {ex.title or ex.status}", ex.status) from ex
        except SdkConnectionError as ex:
            raise SubmitError(f"Could not reach Horizon at {self.horizon_url}: {ex}") from ex

        try:
            return HorizonAccount.model_validate(account_resp).to_account()
        except ValidationError as ex:
            raise SubmitError(f"Unexpected account response for {address}") from ex

    def submit_envelope(self, envelope: TransactionEnvelope) -> SubmissionResult:
        try:
            response = self.server.submit_transaction(envelope, skip_memo_required_check=True)
        except BadRequestError as ex:
            rejection = rejection_from_horizon(ex)
            logger.warning(f"Horizon rejected tx {envelope.hash_hex()}: {rejection.result_codes}")
            raise RejectionError(rejection) from ex
        except BaseHorizonError as ex:
            raise SubmitError(f"Horizon error submitting tx: {ex.title or ex.status}", ex.status) from ex
        except SdkConnectionError as ex:
            raise SubmitError(f"Could not reach Horizon at {self.horizon_url}: {ex}") from ex

        return SubmissionResult(
            transaction_hash=response.get("hash") or envelope.hash_hex(),
            ledger=int(response.get("ledger") or 0),
            successful=response.get("successful", True),
            result_xdr=response.get("result_xdr") or "",
        )
