"""
Step definitions for Cloudflare DDNS reconciliation scenarios.
"""

from behave import given, then, when

from cloudflare_ddns.core.exceptions import (
    RemoteRejected,
    TransportErrorKind,
    TransportFailure,
)
from cloudflare_ddns.core.models import AddressFamily, DnsRecord, OutcomeStatus
from cloudflare_ddns.core.reconciler import Reconciler
from cloudflare_ddns.providers.mock_provider import MockDNSProvider


def _outcome(context, record_id):
    for outcome in context.report.outcomes:
        if outcome.record_id == record_id:
            return outcome
    raise AssertionError(f"No outcome reported for record {record_id}")


@given('a zone "{zone_id}" with records')
def step_impl(context, zone_id):
    """Populate the mock provider with the table's records."""
    context.zone_id = zone_id
    context.provider = MockDNSProvider()
    for row in context.table:
        context.provider.add_record(
            DnsRecord(
                id=row["id"], zone_id=zone_id, type=row["type"], content=row["content"]
            )
        )


@given('the zone "{zone_id}" also has a "{record_type}" record "{record_id}" with content "{content}"')
def step_impl(context, zone_id, record_type, record_id, content):
    context.provider.add_record(
        DnsRecord(id=record_id, zone_id=zone_id, type=record_type, content=content)
    )


@given('the {family} lookup returns "{address}"')
def step_impl(context, family, address):
    context.provider.set_address(AddressFamily(family.lower()), address)


@given("the {family} lookup cannot connect")
def step_impl(context, family):
    context.provider.set_address(AddressFamily(family.lower()), None)


@given("the {family} lookup times out")
def step_impl(context, family):
    family = AddressFamily(family.lower())
    context.provider.fail(
        "detect_public_address",
        family,
        error=TransportFailure(TransportErrorKind.TIMEOUT, "read timed out"),
    )


@given('fetching record "{record_id}" is rejected with code {code:d} and message "{message}"')
def step_impl(context, record_id, code, message):
    context.provider.fail(
        "fetch_record",
        context.zone_id,
        record_id,
        error=RemoteRejected(code, message),
    )


@when('I reconcile records "{record_ids}"')
def step_impl(context, record_ids):
    reconciler = Reconciler(context.provider, console=context.console)
    context.report = reconciler.reconcile(context.zone_id, record_ids.split(","))


@then('record "{record_id}" is reported as {status:w}')
def step_impl(context, record_id, status):
    outcome = _outcome(context, record_id)
    assert outcome.status is OutcomeStatus(status), outcome.describe()


@then('record "{record_id}" changed from "{old}" to "{new}"')
def step_impl(context, record_id, old, new):
    outcome = _outcome(context, record_id)
    assert outcome.status is OutcomeStatus.UPDATED, outcome.describe()
    assert outcome.old_content == old
    assert outcome.new_content == new
    assert f"from {old} to {new}" in context.output.getvalue()


@then('an update of record "{record_id}" with content "{content}" is issued')
def step_impl(context, record_id, content):
    updates = context.provider.calls_to("update_record")
    assert len(updates) == 1, updates
    zone_id, updated_id, update = updates[0]
    assert (zone_id, updated_id, update.content) == (context.zone_id, record_id, content)


@then("no update is issued")
def step_impl(context):
    assert context.provider.calls_to("update_record") == []


@then("the pass completes without abort")
def step_impl(context):
    assert not context.report.aborted, context.report.error


@then('the pass aborts with RemoteRejected {code:d} "{message}" at record "{record_id}"')
def step_impl(context, code, message, record_id):
    outcome = context.report.outcomes[-1]
    assert outcome.status is OutcomeStatus.ABORTED
    assert outcome.record_id == record_id
    assert isinstance(outcome.error, RemoteRejected)
    assert (outcome.error.code, outcome.error.message) == (code, message)


@then('the pass is aborted at record "{record_id}"')
def step_impl(context, record_id):
    outcome = context.report.outcomes[-1]
    assert context.report.aborted
    assert outcome.status is OutcomeStatus.ABORTED
    assert outcome.record_id == record_id


@then('record "{record_id}" is never fetched')
def step_impl(context, record_id):
    fetched = [call[1] for call in context.provider.calls_to("fetch_record")]
    assert record_id not in fetched, fetched


@then("no address lookup is made")
def step_impl(context):
    assert context.provider.calls_to("detect_public_address") == []
