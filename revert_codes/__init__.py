"""Translate compact contract revert codes (``#P:008``) to descriptive names and back."""
from __future__ import annotations

from revert_codes.errors import (
    MalformedErrorString,
    RevertCodeError,
    UnknownCodeError,
    UnknownPrefixError,
    UnresolvableErrorNameError,
    UnresolvableOperationError,
)
from revert_codes.tables import ERROR_CODES, ERROR_PREFIXES, find_duplicate_values
from revert_codes.translate import (
    RevertCodeInfo,
    compress,
    describe,
    expand,
    explain_revert,
    find_codes,
    try_compress,
    try_expand,
)

__all__ = [
    "ERROR_CODES",
    "ERROR_PREFIXES",
    "MalformedErrorString",
    "RevertCodeError",
    "RevertCodeInfo",
    "UnknownCodeError",
    "UnknownPrefixError",
    "UnresolvableErrorNameError",
    "UnresolvableOperationError",
    "compress",
    "describe",
    "expand",
    "explain_revert",
    "find_codes",
    "find_duplicate_values",
    "try_compress",
    "try_expand",
]
