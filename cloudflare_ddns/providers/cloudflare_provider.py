"""
Cloudflare DNS provider implementation.

This module talks to the Cloudflare v4 API and to the icanhazip echo
service using the requests library. Transport exceptions are translated
into TransportErrorKind values here so that callers never inspect
requests or urllib3 internals.
"""

import ipaddress
import logging
from typing import Dict, Optional

import requests
from urllib3.exceptions import NameResolutionError, NewConnectionError
from urllib3.util import connection as urllib3_connection

from .base_provider import DNSProvider
from ..core.exceptions import (
    DecodeFailure,
    RemoteRejected,
    TransportErrorKind,
    TransportFailure,
)
from ..core.models import AddressFamily, DnsRecord, UpdateRequest

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_IP_LOOKUP_URL = "https://{family}.icanhazip.com/"
DEFAULT_TIMEOUT = 10


def classify_request_error(error: requests.RequestException) -> TransportErrorKind:
    """Map a requests exception to a transport error kind."""
    if isinstance(error, requests.exceptions.ConnectTimeout):
        return TransportErrorKind.CONNECTION_UNAVAILABLE
    if isinstance(error, requests.exceptions.Timeout):
        return TransportErrorKind.TIMEOUT
    if isinstance(error, requests.exceptions.ConnectionError):
        reason = error.args[0] if error.args else None
        # MaxRetryError wraps the socket level failure
        reason = getattr(reason, "reason", reason)
        if isinstance(reason, NameResolutionError):
            return TransportErrorKind.NAME_RESOLUTION
        if isinstance(reason, NewConnectionError):
            return TransportErrorKind.CONNECTION_UNAVAILABLE
        return TransportErrorKind.OTHER
    if isinstance(error, requests.exceptions.HTTPError):
        return TransportErrorKind.HTTP_STATUS
    return TransportErrorKind.OTHER


class CloudflareProvider(DNSProvider):
    """DNS provider backed by the Cloudflare v4 API."""

    def __init__(
        self,
        api_token: str,
        api_url: str = DEFAULT_API_URL,
        ip_lookup_url: str = DEFAULT_IP_LOOKUP_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the provider with an API token."""
        self.api_token = api_token
        self.api_url = api_url.rstrip("/")
        self.ip_lookup_url = ip_lookup_url
        self.timeout = timeout
        self.session = session or requests.Session()

        logger.info(f"Cloudflare provider initialized for {self.api_url}")

    @classmethod
    def from_config(cls, config: Dict) -> "CloudflareProvider":
        return cls(
            api_token=config["api_token"],
            api_url=config.get("api_url", DEFAULT_API_URL),
            ip_lookup_url=config.get("ip_lookup_url", DEFAULT_IP_LOOKUP_URL),
            timeout=config.get("timeout", DEFAULT_TIMEOUT),
        )

    def close(self):
        self.session.close()

    def detect_public_address(self, family: AddressFamily) -> str:
        """Ask the family-scoped echo host for our public address."""
        if family is AddressFamily.IPV6 and not urllib3_connection.HAS_IPV6:
            # urllib3 resolves only A records when the kernel lacks IPv6
            raise TransportFailure(
                TransportErrorKind.CONNECTION_UNAVAILABLE,
                "IPv6 is not available on this host",
            )

        url = self.ip_lookup_url.format(family=family.value)
        response = self._send("GET", url)

        if not response.ok:
            raise TransportFailure(
                TransportErrorKind.HTTP_STATUS,
                f"GET {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        address = response.text.strip()
        try:
            parsed = ipaddress.ip_address(address)
        except ValueError as e:
            raise DecodeFailure(
                f"GET {url} did not return an address: {address[:40]!r}"
            ) from e
        if parsed.version != (4 if family is AddressFamily.IPV4 else 6):
            raise DecodeFailure(
                f"GET {url} returned {address}, not an {family.value} address"
            )

        logger.debug(f"Detected {family.value} address {address}")
        return address

    def fetch_record(self, zone_id: str, record_id: str) -> DnsRecord:
        """Get a DNS record by zone and record id."""
        response = self._send(
            "GET", self._record_url(zone_id, record_id), headers=self._auth_headers()
        )
        return DnsRecord.from_api(self._unwrap(response))

    def update_record(
        self, zone_id: str, record_id: str, update: UpdateRequest
    ) -> DnsRecord:
        """Patch a DNS record; fields absent from ``update`` are left alone."""
        response = self._send(
            "PATCH",
            self._record_url(zone_id, record_id),
            headers=self._auth_headers(),
            json=update.to_payload(),
        )
        record = DnsRecord.from_api(self._unwrap(response))
        logger.info(f"Cloudflare: updated record {record.id} -> {record.content}")
        return record

    def _record_url(self, zone_id: str, record_id: str) -> str:
        return f"{self.api_url}/zones/{zone_id}/dns_records/{record_id}"

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_token}"}

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        logger.debug(f"{method} {url}")
        try:
            return self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            kind = classify_request_error(e)
            logger.debug(f"{method} {url} failed ({kind.value}): {e}")
            raise TransportFailure(kind, f"{method} {url} failed: {e}") from e

    def _unwrap(self, response: requests.Response) -> Dict:
        """
        Extract ``result`` from a Cloudflare response envelope.

        Cloudflare reports rejections with a 4xx status and an envelope, so
        the envelope is inspected before the status code. When several
        errors are listed only the first one is reported.
        """
        try:
            envelope = response.json()
        except ValueError as e:
            if not response.ok:
                raise TransportFailure(
                    TransportErrorKind.HTTP_STATUS,
                    f"HTTP {response.status_code} from {response.url}",
                    status_code=response.status_code,
                ) from e
            raise DecodeFailure(f"response body is not valid JSON: {e}") from e

        success = envelope.get("success") if isinstance(envelope, dict) else None
        if not isinstance(success, bool):
            if not response.ok:
                raise TransportFailure(
                    TransportErrorKind.HTTP_STATUS,
                    f"HTTP {response.status_code} from {response.url}",
                    status_code=response.status_code,
                )
            raise DecodeFailure("response body is not a Cloudflare envelope")

        if not success:
            errors = envelope.get("errors") or []
            first = errors[0] if errors and isinstance(errors[0], dict) else {}
            raise RemoteRejected(
                first.get("code", 0), first.get("message", "request was not successful")
            )

        if "result" not in envelope:
            raise DecodeFailure("response envelope has no result")
        return envelope["result"]
