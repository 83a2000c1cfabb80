import pytest
from stellar_sdk import Account as SdkAccount, Keypair, Network, TransactionBuilder

from lumenpipe.core.domain.errors import NotFoundError, RejectionError, SubmitError, unwrap_rejection
from lumenpipe.core.domain.value_objects import Asset

ISSUER = "GACKTN5DAZGWXRWB2WLM6OPBDHAMT6SJNGLJZPQMEZBUR4JUGBX2UK7V"


def signed_envelope(source: Keypair, destination: str):
    envelope = (
        TransactionBuilder(SdkAccount(source.public_key, 1), Network.TESTNET_NETWORK_PASSPHRASE, base_fee=100)
        .append_payment_op(destination=destination, asset=Asset.native().to_sdk(), amount="1")
        .set_timeout(180)
        .build()
    )
    envelope.sign(source)
    return envelope


def test_load_account_maps_horizon_response(fake_horizon, horizon_transport, kp_a, kp_b):
    fake_horizon.set_account(
        kp_a.public_key,
        sequence="4242",
        balances=[
            {"asset_type": "native", "balance": "100.0000000"},
            {"asset_type": "credit_alphanum12", "asset_code": "EURMTL", "asset_issuer": ISSUER,
             "balance": "1000.0000000", "limit": "922337203685.4775807"},
            {"asset_type": "liquidity_pool_shares", "liquidity_pool_id": "abcd", "balance": "1.0000000"},
        ],
        signers=[
            {"key": kp_a.public_key, "weight": 1, "type": "ed25519_public_key"},
            {"key": kp_b.public_key, "weight": 2, "type": "ed25519_public_key"},
        ],
        thresholds={"low_threshold": 1, "med_threshold": 2, "high_threshold": 3},
    )

    account = horizon_transport.load_account(kp_a.public_key)

    assert account.address == kp_a.public_key
    assert account.sequence == 4242
    assert account.get_native_balance() == "100.0000000"
    assert account.get_balance(Asset.credit("EURMTL", ISSUER)) == "1000.0000000"
    assert len(account.balances) == 2
    assert account.signers == {kp_a.public_key: 1, kp_b.public_key: 2}
    assert account.get_master_weight() == 1
    assert (account.thresholds.low, account.thresholds.medium, account.thresholds.high) == (1, 2, 3)
    assert fake_horizon.get_requests("accounts") == [{"endpoint": "accounts", "method": "GET", "id": kp_a.public_key}]


def test_load_account_twice_is_idempotent(fake_horizon, horizon_transport, kp_a):
    fake_horizon.set_account(kp_a.public_key)

    first = horizon_transport.load_account(kp_a.public_key)
    second = horizon_transport.load_account(kp_a.public_key)

    assert first.sequence == second.sequence
    assert first.balances == second.balances


def test_load_unknown_account(horizon_transport, kp_a):
    with pytest.raises(NotFoundError) as exc_info:
        horizon_transport.load_account(kp_a.public_key)

    assert exc_info.value.address == kp_a.public_key


def test_load_account_when_offline(fake_horizon, horizon_transport, kp_a):
    fake_horizon.offline = True

    with pytest.raises(SubmitError) as exc_info:
        horizon_transport.load_account(kp_a.public_key)

    assert not isinstance(exc_info.value, NotFoundError)


def test_submit_envelope_success(fake_horizon, horizon_transport, kp_a, kp_b):
    envelope = signed_envelope(kp_a, kp_b.public_key)

    result = horizon_transport.submit_envelope(envelope)

    assert result.transaction_hash == "abc123"
    assert result.ledger == 12345
    assert result.successful
    [request] = fake_horizon.get_requests("transactions")
    assert request["method"] == "POST"
    assert request["data"]["tx"] == envelope.to_xdr()


def test_submit_envelope_rejection_keeps_payload(fake_horizon, horizon_transport, kp_a, kp_b):
    fake_horizon.set_rejection("tx_failed", ["op_underfunded"])

    with pytest.raises(RejectionError) as exc_info:
        horizon_transport.submit_envelope(signed_envelope(kp_a, kp_b.public_key))

    rejection = unwrap_rejection(exc_info.value)
    assert rejection.status == 400
    assert rejection.title == "Transaction Failed"
    assert rejection.result_codes.transaction == "tx_failed"
    assert rejection.result_codes.operations == ["op_underfunded"]
    assert rejection.result_xdr
    assert rejection.message() == "Insufficient funds for the operation"


def test_submit_envelope_when_offline(fake_horizon, horizon_transport, kp_a, kp_b):
    fake_horizon.offline = True

    with pytest.raises(SubmitError) as exc_info:
        horizon_transport.submit_envelope(signed_envelope(kp_a, kp_b.public_key))

    assert not isinstance(exc_info.value, RejectionError)
    assert unwrap_rejection(exc_info.value) is None
