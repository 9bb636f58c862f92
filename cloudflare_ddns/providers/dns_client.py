"""
DNS Client - Provider selection from configuration

This module picks the DNS provider named by ``default_provider`` and
forwards the reconciler's operations to it.
"""

import logging
from typing import Dict

from .base_provider import DNSProvider
from .cloudflare_provider import CloudflareProvider
from .mock_provider import MockDNSProvider
from ..core.exceptions import MissingConfiguration
from ..core.models import AddressFamily, DnsRecord, UpdateRequest

logger = logging.getLogger(__name__)


class DNSClient(DNSProvider):
    """DNS client that delegates to the configured provider."""

    def __init__(self, config: Dict):
        """Initialize DNS client with configuration."""
        self.config = config
        self.provider = self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "cloudflare")
        providers = self.config.get("dns_providers") or {}
        provider_config = providers.get(provider_name) or {}

        if provider_name == "cloudflare":
            if not provider_config.get("api_token"):
                raise MissingConfiguration("CLOUDFLARE_TOKEN")
            return CloudflareProvider.from_config(provider_config)
        elif provider_name == "mock":
            return MockDNSProvider(provider_config)
        else:
            logger.warning(f"Unknown provider '{provider_name}', using mock provider")
            return MockDNSProvider()

    def detect_public_address(self, family: AddressFamily) -> str:
        return self.provider.detect_public_address(family)

    def fetch_record(self, zone_id: str, record_id: str) -> DnsRecord:
        return self.provider.fetch_record(zone_id, record_id)

    def update_record(
        self, zone_id: str, record_id: str, update: UpdateRequest
    ) -> DnsRecord:
        return self.provider.update_record(zone_id, record_id, update)

    def close(self):
        self.provider.close()
