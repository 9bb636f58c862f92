#!/usr/bin/env python3
"""
Reconciler - Keep DNS records pointed at this host's public address

For each record id the current record is fetched, the public address of
the matching family is detected, and the record is updated only when the
two differ. A host without a route for one family skips those records;
every other failure aborts the pass.
"""

import logging
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..providers.base_provider import DNSProvider
from .exceptions import DDNSError, TransportFailure
from .models import (
    AddressFamily,
    OutcomeStatus,
    ReconciliationReport,
    RecordOutcome,
    UpdateRequest,
)

logger = logging.getLogger(__name__)

STATUS_STYLES = {
    OutcomeStatus.UPDATED: "green",
    OutcomeStatus.WOULD_UPDATE: "yellow",
    OutcomeStatus.UNCHANGED: "blue",
    OutcomeStatus.SKIPPED: "magenta",
    OutcomeStatus.ABORTED: "red",
}


class Reconciler:
    """Runs one reconciliation pass against a DNS provider."""

    def __init__(
        self,
        provider: DNSProvider,
        console: Optional[Console] = None,
        dry_run: bool = False,
    ):
        self.provider = provider
        self.console = console or Console()
        self.dry_run = dry_run

    def reconcile(
        self, zone_id: str, record_ids: Iterable[str]
    ) -> ReconciliationReport:
        """
        Reconcile each record id in order.

        Args:
            zone_id: Zone used to look up the records
            record_ids: Record identifiers, processed sequentially

        Returns:
            Report with one outcome per processed record id. The pass stops
            at the first fatal error, which is recorded as an ABORTED outcome.
        """
        report = ReconciliationReport(zone_id=zone_id)

        if self.dry_run:
            self.console.print(
                "[yellow]DRY RUN MODE - No records will be updated[/yellow]"
            )

        for record_id in record_ids:
            try:
                outcome = self.reconcile_record(zone_id, record_id)
            except DDNSError as e:
                logger.error(f"Reconciliation aborted at record {record_id}: {e}")
                outcome = RecordOutcome(
                    record_id=record_id, status=OutcomeStatus.ABORTED, error=e
                )

            report.outcomes.append(outcome)
            self._print_outcome(outcome)

            if outcome.status is OutcomeStatus.ABORTED:
                break

        return report

    def reconcile_record(self, zone_id: str, record_id: str) -> RecordOutcome:
        """Reconcile a single record; raises DDNSError on fatal errors."""
        record = self.provider.fetch_record(zone_id, record_id)
        family = AddressFamily.from_record_type(record.type)

        try:
            address = self.provider.detect_public_address(family)
        except TransportFailure as e:
            if not e.connection_unavailable:
                raise
            logger.warning(f"{family.value} address not available: {e}")
            return RecordOutcome(
                record_id=record.id, status=OutcomeStatus.SKIPPED, family=family
            )

        if address == record.content:
            logger.info(f"Record {record.id} already has the address {address}")
            return RecordOutcome(
                record_id=record.id,
                status=OutcomeStatus.UNCHANGED,
                family=family,
                old_content=record.content,
                new_content=address,
            )

        if self.dry_run:
            logger.info(f"Dry run: {record.id} {record.content} -> {address}")
            status = OutcomeStatus.WOULD_UPDATE
        else:
            self.provider.update_record(
                record.zone_id, record.id, UpdateRequest(content=address)
            )
            logger.info(f"Updated record {record.id}: {record.content} -> {address}")
            status = OutcomeStatus.UPDATED

        return RecordOutcome(
            record_id=record.id,
            status=status,
            family=family,
            old_content=record.content,
            new_content=address,
        )

    def _print_outcome(self, outcome: RecordOutcome):
        style = STATUS_STYLES[outcome.status]
        self.console.print(f"[{style}]{escape(outcome.describe())}[/{style}]")

    def display_summary(self, report: ReconciliationReport):
        """Display a summary of the pass."""
        table = Table(title="DNS Reconciliation Summary")
        table.add_column("Outcome", style="cyan")
        table.add_column("Count", style="magenta")
        table.add_column("Records", style="white")

        for status, count in report.counts().items():
            if count:
                table.add_row(
                    status.value.replace("_", " ").title(),
                    str(count),
                    ", ".join(o.record_id for o in report.by_status(status)),
                )

        self.console.print(table)
        if report.aborted:
            error = report.error
            self.console.print(
                f"\n[bold red]Pass aborted: {error.kind}: {escape(str(error))}[/bold red]"
            )
