"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
"""

from abc import ABC, abstractmethod

from ..core.models import AddressFamily, DnsRecord, UpdateRequest


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def detect_public_address(self, family: AddressFamily) -> str:
        """Return the caller's public address for the given family."""
        pass

    @abstractmethod
    def fetch_record(self, zone_id: str, record_id: str) -> DnsRecord:
        """Get the current state of a DNS record."""
        pass

    @abstractmethod
    def update_record(
        self, zone_id: str, record_id: str, update: UpdateRequest
    ) -> DnsRecord:
        """Overwrite the fields in ``update`` and return the stored record."""
        pass

    def close(self):
        """Release any resources held by the provider."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
