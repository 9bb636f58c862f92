"""
Exceptions raised while reconciling DNS records.

Provider operations raise subclasses of ProviderError; the reconciler
decides which of them end the pass.
"""

from enum import Enum
from typing import Optional


class TransportErrorKind(Enum):
    """Classification of a failed HTTP call."""

    CONNECTION_UNAVAILABLE = "connection_unavailable"
    NAME_RESOLUTION = "name_resolution"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    OTHER = "other"


class DDNSError(Exception):
    """Base class for all reconciler errors."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class ProviderError(DDNSError):
    """Raised when a remote operation fails."""


class TransportFailure(ProviderError):
    """The HTTP call could not complete."""

    def __init__(
        self,
        kind: TransportErrorKind,
        message: str,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.transport_kind = kind
        self.status_code = status_code

    @property
    def connection_unavailable(self) -> bool:
        return self.transport_kind is TransportErrorKind.CONNECTION_UNAVAILABLE

    def __str__(self):
        return f"{self.transport_kind.value}: {self.args[0]}"


class RemoteRejected(ProviderError):
    """
    The provider answered with ``success: false``.

    Only the first entry of the envelope's ``errors`` list is kept.
    """

    def __init__(self, code: int, message: str):
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self):
        return f"Cloudflare error {self.code}: {self.message}"


class DecodeFailure(ProviderError):
    """A response body could not be parsed into the expected shape."""


class UnsupportedRecordType(DDNSError):
    """The record type has no address family (only A and AAAA do)."""

    def __init__(self, record_type: str):
        super().__init__(f"unexpected {record_type} record type")
        self.record_type = record_type


class MissingConfiguration(DDNSError):
    """A required setting was not supplied by any configuration source."""

    def __init__(self, setting: str):
        super().__init__(f"missing required setting: {setting}")
        self.setting = setting
