#!/usr/bin/env python3
"""
Cloudflare DDNS - Demo Script

This script demonstrates the reconciler using the mock provider, so no
Cloudflare account or network access is needed.
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cloudflare_ddns.core.exceptions import RemoteRejected
from cloudflare_ddns.core.models import AddressFamily
from cloudflare_ddns.core.reconciler import Reconciler
from cloudflare_ddns.providers.mock_provider import MockDNSProvider

# Initialize rich console
console = Console()

ZONE_ID = "023e105f4ecef8ad9ca31a8372d0c353"


def create_demo_provider():
    """Create a mock provider holding one A and one AAAA record."""
    return MockDNSProvider(
        {
            "records": [
                {
                    "id": "372e67954025e0ba6aaa6d586b9e0b59",
                    "zone_id": ZONE_ID,
                    "type": "A",
                    "content": "198.51.100.4",
                    "name": "home.example.com",
                },
                {
                    "id": "9a7806061c88ada191ed06f989cc3dac",
                    "zone_id": ZONE_ID,
                    "type": "AAAA",
                    "content": "2001:db8::4",
                    "name": "home.example.com",
                },
            ],
            "addresses": {"ipv4": "198.51.100.4"},
        }
    )


def display_demo_header():
    """Display the demo header."""
    console.print(
        Panel.fit(
            "[bold blue]Cloudflare DDNS - Demo[/bold blue]\n"
            "[cyan]Keeping home.example.com pointed at this host[/cyan]",
            border_style="blue",
        )
    )
    console.print()


def display_current_state(provider):
    """Display the records stored by the mock provider."""
    table = Table(title="Current DNS Records")
    table.add_column("Record ID", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Type", style="magenta")
    table.add_column("Content", style="green")

    for record in provider.records.values():
        table.add_row(record.id, record.name, record.type, record.content)

    console.print(table)
    console.print()


def run_pass(provider, title, dry_run=False):
    """Run one reconciliation pass and show its summary."""
    console.print(f"[bold]{title}[/bold]")
    reconciler = Reconciler(provider, console=console, dry_run=dry_run)
    record_ids = [record.id for record in provider.records.values()]
    report = reconciler.reconcile(ZONE_ID, record_ids)
    reconciler.display_summary(report)
    console.print()
    return report


def main():
    """Walk through the reconciliation scenarios."""
    display_demo_header()
    provider = create_demo_provider()
    display_current_state(provider)

    run_pass(provider, "1. Address unchanged, no IPv6 connectivity")

    provider.set_address(AddressFamily.IPV4, "203.0.113.9")
    run_pass(provider, "2. New IPv4 address (dry run)", dry_run=True)
    run_pass(provider, "3. New IPv4 address")

    provider.set_address(AddressFamily.IPV6, "2001:db8::9")
    run_pass(provider, "4. IPv6 connectivity restored")
    display_current_state(provider)

    first_id = next(iter(provider.records.values())).id
    provider.fail(
        "fetch_record",
        ZONE_ID,
        first_id,
        error=RemoteRejected(1003, "Invalid or missing zone id."),
    )
    run_pass(provider, "5. Provider rejects the request")


if __name__ == "__main__":
    main()
