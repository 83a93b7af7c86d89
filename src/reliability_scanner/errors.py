from __future__ import annotations


class ScannerError(Exception):
    """Base class for reliability-scanner errors."""


class ConfigurationError(ScannerError):
    """Raised when scanner or cluster configuration cannot be resolved."""


class ClientInitError(ScannerError):
    """Raised when the Kubernetes API client cannot be built."""


class QueryError(ScannerError):
    """Raised when listing cluster resources fails for any reason."""


class MissingKeyError(ScannerError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"key: {key} does not exist")
