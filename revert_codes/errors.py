from __future__ import annotations


class RevertCodeError(LookupError):
    """Base class for every failure to translate a revert code."""

    def __init__(self, message: str, *, token: str = "", value: str = ""):
        super().__init__(message)
        self.token = token
        self.value = value

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""

    def __reduce__(self):
        return (_rebuild, (type(self), str(self), self.token, self.value))


def _rebuild(cls: type[RevertCodeError], message: str, token: str, value: str) -> RevertCodeError:
    return cls(message, token=token, value=value)


class MalformedErrorString(RevertCodeError, ValueError):
    pass


class UnknownPrefixError(RevertCodeError, KeyError):
    pass


class UnknownCodeError(RevertCodeError, KeyError):
    pass


class UnresolvableOperationError(RevertCodeError):
    pass


class UnresolvableErrorNameError(RevertCodeError):
    pass
