"""
Core reconciliation functionality.

This package contains the record model, the error taxonomy and the
reconciliation loop.
"""

from .exceptions import (
    DDNSError,
    DecodeFailure,
    MissingConfiguration,
    ProviderError,
    RemoteRejected,
    TransportErrorKind,
    TransportFailure,
    UnsupportedRecordType,
)
from .models import AddressFamily, DnsRecord, OutcomeStatus, UpdateRequest
from .reconciler import Reconciler

__all__ = [
    "AddressFamily",
    "DDNSError",
    "DecodeFailure",
    "DnsRecord",
    "MissingConfiguration",
    "OutcomeStatus",
    "ProviderError",
    "Reconciler",
    "RemoteRejected",
    "TransportErrorKind",
    "TransportFailure",
    "UnsupportedRecordType",
    "UpdateRequest",
]
