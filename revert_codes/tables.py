from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping

# Contract error codes, shared by every operation prefix.
ERROR_CODES: Mapping[str, str] = MappingProxyType(
    {
        "001": "ROUTER_EMPTY",
        "002": "AMOUNT_IS_ZERO",
        "003": "BAD_ROUTER",
        "004": "BAD_ASSET",
        "005": "VALUE_MISMATCH",
        "006": "ETH_WITH_ERC_TRANSFER",
        "007": "RECIPIENT_EMPTY",
        "008": "INSUFFICIENT_FUNDS",
        "009": "USER_EMPTY",
        "010": "SENDING_CHAIN_FALLBACK_EMPTY",
        "011": "SAME_CHAINIDS",
        "012": "INVALID_CHAINIDS",
        "013": "TIMEOUT_TOO_LOW",
        "014": "TIMEOUT_TOO_HIGH",
        "015": "DIGEST_EXISTS",
        "016": "ROUTER_MISMATCH",
        "017": "ETH_WITH_ROUTER_PREPARE",
        "018": "INSUFFICIENT_LIQUIDITY",
        "019": "INVALID_VARIANT_DATA",
        "020": "EXPIRED",
        "021": "ALREADY_COMPLETED",
        "022": "INVALID_SIGNATURE",
        "023": "INVALID_RELAYER_FEE",
        "024": "INVALID_CALL_DATA",
        "025": "ROUTER_MUST_CANCEL",
        "026": "RECEIVING_ADDRESS_EMPTY",
        "027": "NOT_TRANSACTION_MANAGER",
        "028": "TRANSFER_FAILED",
    }
)

# Operation that raised the revert.
ERROR_PREFIXES: Mapping[str, str] = MappingProxyType(
    {
        "#AL": "addLiquidity",
        "#RL": "removeLiquidity",
        "#P": "prepare",
        "#F": "fulfill",
        "#C": "cancel",
        "#OTM": "onlyTransactionManager",
        "#TE": "transferEther",
    }
)


def reverse_lookup(table: Mapping[str, str], value: str) -> str | None:
    """Return the first key (insertion order) whose value equals ``value``."""

    for key, candidate in table.items():
        if candidate == value:
            return key
    return None


def find_duplicate_values(table: Mapping[str, str]) -> Dict[str, List[str]]:
    seen: Dict[str, List[str]] = {}
    for key, value in table.items():
        seen.setdefault(value, []).append(key)
    return {value: keys for value, keys in seen.items() if len(keys) > 1}
