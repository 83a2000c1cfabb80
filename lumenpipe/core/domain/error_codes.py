# Horizon result codes mapped to readable English messages

TRANSACTION_ERROR_CODES = {
    "tx_failed": "Transaction failed (error in one of the operations)",
    "tx_bad_auth": "Too few valid signatures or wrong network",
    "tx_bad_auth_extra": "Unused signatures attached to transaction",
    "tx_bad_seq": "Bad transaction sequence number",
    "tx_insufficient_balance": "Insufficient balance to pay fee",
    "tx_insufficient_fee": "Fee is too small",
    "tx_no_source_account": "Source account not found",
    "tx_internal_error": "Internal Horizon error",
    "tx_too_late": "Transaction is too late (time bounds)",
    "tx_too_early": "Transaction is not yet valid (time bounds)",
    "tx_missing_operation": "No operations in transaction",
    "tx_malformed": "Malformed transaction",
}

OPERATION_ERROR_CODES = {
    "op_underfunded": "Insufficient funds for the operation",
    "op_no_destination": "Destination account not found",
    "op_no_source_account": "Source account not found",
    "op_not_authorized": "Destination not authorized",
    "op_line_full": "Trustline limit exceeded for destination",
    "op_no_trust": "Destination has no trustline",
    "op_bad_auth": "Too few valid signatures or wrong network",
    "op_low_reserve": "Not enough XLM to meet the minimum reserve",
    "op_malformed": "Malformed operation",
    "op_already_exists": "Account already exists",
    "op_no_issuer": "Asset issuer not found",
    "op_invalid_limit": "Trust limit is below the current balance",
    "op_src_no_trust": "Source account has no trustline",
    "op_src_not_authorized": "Source account not authorized",
    "op_too_many_signers": "Too many signers on the account",
    "op_bad_flags": "Invalid account flags",
    "op_unknown_signer": "Signer not found on the account",
    "op_threshold_out_of_range": "Threshold or weight out of range",
}


def get_stellar_error_message(result_codes: dict) -> str:
    """
    Returns a human-readable error message for result_codes from Horizon.
    An operation code wins over the transaction code.
    """
    op_codes = [code for code in result_codes.get("operations") or [] if code != "op_success"]
    if op_codes:
        op_code = op_codes[0]
        return OPERATION_ERROR_CODES.get(op_code, f"Operation code: {op_code}")

    tx_code = result_codes.get("transaction")
    if tx_code:
        return TRANSACTION_ERROR_CODES.get(tx_code, f"Transaction code: {tx_code}")

    return "Unknown Stellar error"
