from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List

from revert_codes.errors import (
    MalformedErrorString,
    RevertCodeError,
    UnknownCodeError,
    UnknownPrefixError,
    UnresolvableErrorNameError,
    UnresolvableOperationError,
)
from revert_codes.tables import ERROR_CODES, ERROR_PREFIXES, reverse_lookup

DELIMITER = ":"
COMPACT_CODE_RE = re.compile(r"#[A-Z]+:[0-9]{3}(?![0-9])")

logger = logging.getLogger("revert_codes").getChild("translate")


@dataclass(frozen=True)
class RevertCodeInfo:
    """A compact revert code resolved against both tables."""

    code: str
    prefix: str
    index: str
    operation: str
    error_name: str

    @property
    def full_error(self) -> str:
        return f"{self.operation}{DELIMITER}{self.error_name}"


def _split(value: str) -> tuple[str, str]:
    head, sep, tail = value.partition(DELIMITER)
    if not sep:
        logger.debug("Rejected revert string without delimiter: %r", value)
        raise MalformedErrorString(
            f"Expected '<prefix>{DELIMITER}<code>' but found no '{DELIMITER}' in {value!r}",
            token=value,
            value=value,
        )
    return head, tail


def describe(code: str) -> RevertCodeInfo:
    """Resolve a compact code such as ``#P:008`` into its parts."""

    prefix, index = _split(code)
    prefix = prefix.strip()
    index = index.strip()

    operation = ERROR_PREFIXES.get(prefix)
    if operation is None:
        logger.debug("Unknown revert prefix %r in %r", prefix, code)
        raise UnknownPrefixError(f"Unknown revert prefix {prefix!r}", token=prefix, value=code)

    error_name = ERROR_CODES.get(index)
    if error_name is None:
        logger.debug("Unknown revert code %r in %r", index, code)
        raise UnknownCodeError(f"Unknown revert code {index!r}", token=index, value=code)

    return RevertCodeInfo(
        code=f"{prefix}{DELIMITER}{index}",
        prefix=prefix,
        index=index,
        operation=operation,
        error_name=error_name,
    )


def expand(code: str) -> str:
    """Translate ``#P:008`` into ``prepare:INSUFFICIENT_FUNDS``."""

    return describe(code).full_error


def compress(full_error: str) -> str:
    """Translate ``prepare:INSUFFICIENT_FUNDS`` back into ``#P:008``.

    Both names are stripped of surrounding whitespace. Reverse lookups take
    the first matching key in table order.
    """

    operation, error_name = _split(full_error)
    operation = operation.strip()
    error_name = error_name.strip()

    prefix = reverse_lookup(ERROR_PREFIXES, operation)
    if prefix is None:
        logger.debug("No revert prefix for operation %r in %r", operation, full_error)
        raise UnresolvableOperationError(
            f"No revert prefix maps to operation {operation!r}", token=operation, value=full_error
        )

    index = reverse_lookup(ERROR_CODES, error_name)
    if index is None:
        logger.debug("No revert code for error name %r in %r", error_name, full_error)
        raise UnresolvableErrorNameError(
            f"No revert code maps to error name {error_name!r}", token=error_name, value=full_error
        )

    return f"{prefix}{DELIMITER}{index}"


def try_expand(code: str) -> str | None:
    try:
        return expand(code)
    except RevertCodeError:
        return None


def try_compress(full_error: str) -> str | None:
    try:
        return compress(full_error)
    except RevertCodeError:
        return None


def find_codes(text: str | None) -> List[str]:
    """Return compact codes found in a revert reason or log line, in order."""

    return COMPACT_CODE_RE.findall(text or "")


def explain_revert(message: str | None) -> str:
    """Replace each known compact code in ``message`` with its descriptive form."""

    def _substitute(match: re.Match[str]) -> str:
        found = match.group(0)
        return try_expand(found) or found

    return COMPACT_CODE_RE.sub(_substitute, message or "")
