"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that stores records in memory
for safe testing and demonstration purposes.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .base_provider import DNSProvider
from ..core.exceptions import (
    ProviderError,
    RemoteRejected,
    TransportErrorKind,
    TransportFailure,
)
from ..core.models import AddressFamily, DnsRecord, UpdateRequest

logger = logging.getLogger(__name__)


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """
        Initialize mock provider.

        ``config`` may contain ``records`` (a list of record dictionaries in
        the Cloudflare result shape) and ``addresses`` (a mapping of
        ``ipv4``/``ipv6`` to the address the echo service should report).
        A family missing from ``addresses`` behaves like a host without a
        route for it.
        """
        config = config or {}
        self.records: Dict[Tuple[str, str], DnsRecord] = {}
        self.addresses: Dict[AddressFamily, str] = {}
        self.errors: Dict[Tuple, ProviderError] = {}
        self.calls: List[Tuple] = []

        for data in config.get("records", []):
            self.add_record(DnsRecord.from_api(data))
        for family, address in config.get("addresses", {}).items():
            self.addresses[AddressFamily(family)] = address

        logger.info("Mock DNS provider initialized")

    def add_record(self, record: DnsRecord):
        self.records[(record.zone_id, record.id)] = record

    def set_address(self, family: AddressFamily, address: Optional[str]):
        """Set the detected address; ``None`` makes the family unreachable."""
        if address is None:
            self.addresses.pop(family, None)
        else:
            self.addresses[family] = address

    def fail(self, operation: str, *args, error: ProviderError):
        """Make ``operation`` called with ``args`` raise ``error``."""
        self.errors[(operation,) + args] = error

    def detect_public_address(self, family: AddressFamily) -> str:
        self._record_call("detect_public_address", family)
        if family not in self.addresses:
            raise TransportFailure(
                TransportErrorKind.CONNECTION_UNAVAILABLE,
                f"no {family.value} route to lookup host",
            )
        logger.info(f"Mock: Detected {family.value} address {self.addresses[family]}")
        return self.addresses[family]

    def fetch_record(self, zone_id: str, record_id: str) -> DnsRecord:
        self._record_call("fetch_record", zone_id, record_id)
        record = self.records.get((zone_id, record_id))
        if record is None:
            raise RemoteRejected(81044, "Record does not exist.")
        logger.info(f"Mock: Retrieved record {record_id}")
        return record

    def update_record(
        self, zone_id: str, record_id: str, update: UpdateRequest
    ) -> DnsRecord:
        self._record_call("update_record", zone_id, record_id, update)
        record = self.records.get((zone_id, record_id))
        if record is None:
            raise RemoteRejected(81044, "Record does not exist.")

        updated = DnsRecord(
            id=record.id,
            zone_id=record.zone_id,
            type=record.type,
            content=update.content,
            name=record.name,
        )
        self.add_record(updated)
        logger.info(f"Mock: Updated record {record_id} -> {update.content}")
        return updated

    def _record_call(self, operation: str, *args):
        self.calls.append((operation,) + args)
        error = self.errors.get((operation,) + args)
        if error is not None:
            raise error

    def calls_to(self, operation: str) -> List[Tuple]:
        return [call[1:] for call in self.calls if call[0] == operation]
