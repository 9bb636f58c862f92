"""
Data types shared by the providers and the reconciler.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .exceptions import DDNSError, DecodeFailure, UnsupportedRecordType


class AddressFamily(Enum):
    """Address family of a record; the value is the echo host label."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"

    @classmethod
    def from_record_type(cls, record_type: str) -> "AddressFamily":
        """Map a DNS record type to the family its content holds."""
        if record_type == "A":
            return cls.IPV4
        if record_type == "AAAA":
            return cls.IPV6
        raise UnsupportedRecordType(record_type)


@dataclass(frozen=True)
class DnsRecord:
    """One managed record as currently stored by the provider."""

    id: str
    zone_id: str
    type: str
    content: str
    name: str = ""

    @classmethod
    def from_api(cls, data: Dict) -> "DnsRecord":
        """Build a record from a Cloudflare ``result`` object."""
        if not isinstance(data, dict):
            raise DecodeFailure(f"expected a record object, got {type(data).__name__}")
        try:
            return cls(
                id=str(data["id"]),
                zone_id=str(data["zone_id"]),
                type=str(data["type"]),
                content=str(data["content"]),
                name=str(data.get("name", "")),
            )
        except KeyError as e:
            raise DecodeFailure(f"record is missing field {e}") from e


@dataclass(frozen=True)
class UpdateRequest:
    """Fields to overwrite on a record. Only ``content`` may change."""

    content: str

    def to_payload(self) -> Dict[str, str]:
        return {"content": self.content}


class OutcomeStatus(Enum):
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    WOULD_UPDATE = "would_update"
    ABORTED = "aborted"


@dataclass
class RecordOutcome:
    """What happened to a single record identifier during a pass."""

    record_id: str
    status: OutcomeStatus
    family: Optional[AddressFamily] = None
    old_content: Optional[str] = None
    new_content: Optional[str] = None
    error: Optional[DDNSError] = None

    def describe(self) -> str:
        family = self.family.value if self.family else "unknown"
        if self.status is OutcomeStatus.UPDATED:
            return (
                f"updated record {self.record_id} address "
                f"from {self.old_content} to {self.new_content}"
            )
        if self.status is OutcomeStatus.WOULD_UPDATE:
            return (
                f"would update record {self.record_id} address "
                f"from {self.old_content} to {self.new_content}"
            )
        if self.status is OutcomeStatus.UNCHANGED:
            return f"record {self.record_id} already has the address {self.old_content}"
        if self.status is OutcomeStatus.SKIPPED:
            return f"{family} address not available, skipped record {self.record_id}"
        return f"aborted at record {self.record_id}: {self.error.kind}: {self.error}"


@dataclass
class ReconciliationReport:
    """Ordered outcomes of one reconciliation pass."""

    zone_id: str
    outcomes: List[RecordOutcome] = field(default_factory=list)

    @property
    def aborted(self) -> bool:
        return any(o.status is OutcomeStatus.ABORTED for o in self.outcomes)

    @property
    def error(self) -> Optional[DDNSError]:
        for outcome in self.outcomes:
            if outcome.status is OutcomeStatus.ABORTED:
                return outcome.error
        return None

    def by_status(self, status: OutcomeStatus) -> List[RecordOutcome]:
        return [o for o in self.outcomes if o.status is status]

    def counts(self) -> Dict[OutcomeStatus, int]:
        return {status: len(self.by_status(status)) for status in OutcomeStatus}
