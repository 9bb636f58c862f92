"""
Cloudflare DDNS - Keep DNS records in sync with this host's public address

Detects the public IPv4/IPv6 address of the machine and updates Cloudflare
A and AAAA records whose content no longer matches.
"""

__version__ = "1.0.0"
__author__ = "Cloudflare DDNS Team"
__description__ = "Dynamic DNS reconciler for Cloudflare records"

from .core.reconciler import Reconciler
from .providers.cloudflare_provider import CloudflareProvider
from .providers.dns_client import DNSClient

__all__ = [
    "Reconciler",
    "CloudflareProvider",
    "DNSClient",
]
