from datetime import datetime, timezone

import pytest

from paymill_payments import (
    Fee,
    Interval,
    IntervalUnit,
    Offer,
    Payment,
    Preauthorization,
    PreauthorizationStatus,
    Subscription,
    Transaction,
    Webhook,
    WebhookEventType,
)
from paymill_payments.core.errors import (
    InvalidArgumentError,
    MissingIdentifierError,
    NotFoundError,
    ValidationError,
)
from paymill_payments.core.service import PaymillList

TOKEN = "098f6bcd4621d373cade4e832627b4f6"


def test_list_merges_filter_order_and_pagination(context, session):
    session.queue(
        {
            "data": [
                {"id": "offer_1", "amount": "4200", "unknown": True},
                {"id": "offer_2", "amount": 4250},
            ],
            "data_count": "17",
            "mode": "test",
        }
    )

    page = context.offers.list(
        Offer.create_filter().by_amount_greater_than(4100),
        Offer.create_order().by_amount().desc(),
        count=2,
        offset=4,
    )

    call = session.calls[0]
    assert (call.method, call.url) == ("GET", "https://api.test/v2.1/offers")
    assert call.params == {"amount": ">4100", "order": "amount_desc", "count": 2, "offset": 4}
    assert isinstance(page, PaymillList)
    assert page.data_count == 17
    assert [offer.id for offer in page] == ["offer_1", "offer_2"]
    assert page[0].amount == 4200
    assert len(page) == 2


def test_list_without_constraints_sends_no_parameters(context, session):
    session.queue({"data": [], "data_count": 0})

    page = context.webhooks.list()

    assert session.calls[0].params is None
    assert page.data == []
    assert page.data_count == 0


def test_list_rejects_builders_of_another_resource(context, session):
    with pytest.raises(InvalidArgumentError):
        context.transactions.list(Offer.create_filter())
    with pytest.raises(InvalidArgumentError):
        context.transactions.list(order=Webhook.create_order())
    with pytest.raises(InvalidArgumentError):
        context.transactions.list(count=-1)

    assert session.calls == []


def test_get_accepts_id_or_resource(context, session):
    session.queue({"data": {"id": "client_1", "email": "a@example.com"}})
    session.queue({"data": {"id": "client_1", "email": "a@example.com"}})

    by_id = context.clients.get("client_1")
    by_resource = context.clients.get(by_id)

    assert by_id == by_resource
    assert [call.url for call in session.calls] == [
        "https://api.test/v2.1/clients/client_1",
        "https://api.test/v2.1/clients/client_1",
    ]


def test_get_unknown_id_surfaces_not_found(context, session):
    session.queue({"error": "Client not found", "exception": "client_not_found"}, status=404)

    with pytest.raises(NotFoundError):
        context.clients.get("client_missing")


@pytest.mark.parametrize("operation", ["get", "update", "delete"])
def test_operations_without_id_fail_before_any_request(context, session, operation):
    with pytest.raises(MissingIdentifierError):
        getattr(context.webhooks, operation)(Webhook(url="https://example.com"))

    assert session.calls == []


def test_update_sends_only_updateable_fields(context, session):
    session.queue({"data": {"id": "offer_1", "name": "Renamed", "amount": 4300}})
    offer = Offer(
        "offer_1",
        name="Renamed",
        amount=4300,
        trial_period_days=7,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )

    updated = context.offers.update(offer)

    call = session.calls[0]
    assert (call.method, call.url) == ("PUT", "https://api.test/v2.1/offers/offer_1")
    assert call.data == {"name": "Renamed", "amount": "4300"}
    assert updated == Offer("offer_1", name="Renamed", amount=4300)


def test_offer_update_can_cascade_to_subscriptions(context, session):
    session.queue({"data": {"id": "offer_1"}})

    context.offers.update(Offer("offer_1", amount=4300), update_subscriptions=True)

    assert session.calls[0].data == {"amount": "4300", "update_subscriptions": "true"}


def test_offer_create_validates_before_sending(context, session):
    session.queue({"data": {"id": "offer_1", "interval": "1 MONTH", "created_at": 1704067200}})

    offer = context.offers.create(4200, "EUR", "1 month", "Nerd Special", trial_period_days=0)

    assert session.calls[0].data == {
        "amount": "4200",
        "currency": "EUR",
        "interval": "1 MONTH",
        "name": "Nerd Special",
        "trial_period_days": "0",
    }
    assert offer.interval == Interval(1, IntervalUnit.MONTH)

    with pytest.raises(InvalidArgumentError):
        context.offers.create(0, "EUR", "1 MONTH", "Free")
    with pytest.raises(InvalidArgumentError):
        context.offers.create(4200, "EUR", None, "No interval")
    assert len(session.calls) == 1


def test_offer_delete_passes_subscription_flag(context, session):
    session.queue({"data": []})

    deleted = context.offers.delete("offer_1", remove_with_subscriptions=True)

    call = session.calls[0]
    assert (call.method, call.url) == ("DELETE", "https://api.test/v2.1/offers/offer_1")
    assert call.data == {"remove_with_subscriptions": "true"}
    assert deleted == Offer("offer_1")


def test_transaction_with_token(context, session):
    session.queue({"data": {"id": "tran_1", "amount": "4200", "status": "closed"}})

    transaction = context.transactions.create_with_token(
        TOKEN, 4200, "EUR", fee=Fee(amount=30, payment="pay_fee", currency="EUR")
    )

    assert session.calls[0].data == {
        "token": TOKEN,
        "amount": "4200",
        "currency": "EUR",
        "fee_amount": "30",
        "fee_payment": "pay_fee",
        "fee_currency": "EUR",
    }
    assert transaction.amount == 4200


def test_transaction_with_payment_sends_references(context, session):
    session.queue({"data": {"id": "tran_1", "payment": {"id": "pay_1"}}})

    transaction = context.transactions.create_with_payment(
        Payment("pay_1"), 4200, "EUR", "Test Transaction", client="client_1"
    )

    assert session.calls[0].data == {
        "payment": "pay_1",
        "amount": "4200",
        "currency": "EUR",
        "description": "Test Transaction",
        "client": "client_1",
    }
    assert transaction.payment == Payment("pay_1")


def test_transaction_create_checks_arguments(context, session):
    with pytest.raises(InvalidArgumentError):
        context.transactions.create_with_token("", 4200, "EUR")
    with pytest.raises(InvalidArgumentError):
        context.transactions.create_with_token(TOKEN, "4200", "EUR")
    with pytest.raises(MissingIdentifierError):
        context.transactions.create_with_payment(Payment(), 4200, "EUR")
    with pytest.raises(MissingIdentifierError):
        context.transactions.create_with_preauthorization(Preauthorization(), 4200, "EUR")

    assert session.calls == []


def test_remote_validation_error_is_raised_unchanged(context, session):
    session.queue({"error": "Invalid currency", "exception": "currency_invalid"}, status=400)

    with pytest.raises(ValidationError) as excinfo:
        context.transactions.create_with_token(TOKEN, 4200, "XXX")

    assert excinfo.value.code == "currency_invalid"
    assert len(session.calls) == 1


def test_transaction_update_sends_description(context, session):
    session.queue({"data": {"id": "tran_1", "description": "updated"}})

    context.transactions.update(Transaction("tran_1", amount=4200, description="updated"))

    assert session.calls[0].data == {"description": "updated"}


def test_preauthorization_create_unwraps_transaction(context, session):
    session.queue(
        {
            "data": {
                "id": "tran_1",
                "amount": "4202",
                "status": "preauth",
                "preauthorization": {"id": "preauth_1", "amount": "4202", "status": "closed"},
            }
        }
    )

    preauthorization = context.preauthorizations.create_with_token(TOKEN, 4202, "EUR")

    call = session.calls[0]
    assert (call.method, call.url) == ("POST", "https://api.test/v2.1/preauthorizations")
    assert preauthorization.id == "preauth_1"
    assert preauthorization.status is PreauthorizationStatus.CLOSED
    assert preauthorization.transaction.id == "tran_1"
    assert preauthorization.transaction.preauthorization == Preauthorization("preauth_1")


def test_preauthorization_get_reads_plain_object(context, session):
    session.queue({"data": {"id": "preauth_1", "amount": 4202}})

    assert context.preauthorizations.get("preauth_1") == Preauthorization("preauth_1", amount=4202)


def test_refund_posts_to_transaction_path(context, session):
    session.queue({"data": {"id": "refund_1", "amount": "100", "transaction": {"id": "tran_1"}}})

    refund = context.refunds.refund_transaction(Transaction("tran_1"), 100, "partial")

    call = session.calls[0]
    assert (call.method, call.url) == ("POST", "https://api.test/v2.1/refunds/tran_1")
    assert call.data == {"amount": "100", "description": "partial"}
    assert refund.transaction == Transaction("tran_1")


def test_subscription_without_offer_needs_own_terms(context, session):
    with pytest.raises(InvalidArgumentError):
        context.subscriptions.create(Payment("pay_1"), amount=3000)
    assert session.calls == []

    session.queue({"data": {"id": "sub_1", "status": "active", "interval": "1 WEEK,monday"}})
    start = datetime(2024, 2, 1, tzinfo=timezone.utc)

    subscription = context.subscriptions.create(
        "pay_1", amount=3000, currency="EUR", interval="1 week,monday", start_at=start
    )

    assert session.calls[0].data == {
        "payment": "pay_1",
        "amount": "3000",
        "currency": "EUR",
        "interval": "1 WEEK,monday",
        "start_at": str(int(start.timestamp())),
    }
    assert subscription.interval == Interval.parse("1 WEEK,monday")


def test_subscription_from_offer(context, session):
    session.queue({"data": {"id": "sub_1", "offer": {"id": "offer_1"}}})

    context.subscriptions.create(Payment("pay_1"), offer=Offer("offer_1"), client="client_1")

    assert session.calls[0].data == {"payment": "pay_1", "offer": "offer_1", "client": "client_1"}


def test_subscription_cancel_and_delete(context, session):
    session.queue({"data": {"id": "sub_1", "is_canceled": True}})
    session.queue({"data": {"id": "sub_1", "is_deleted": True}})

    canceled = context.subscriptions.cancel(Subscription("sub_1"))
    deleted = context.subscriptions.delete("sub_1")

    assert [call.data for call in session.calls] == [{"remove": "false"}, {"remove": "true"}]
    assert canceled.canceled is True
    assert deleted.deleted is True


def test_subscription_pause_and_amount_change(context, session):
    for _ in range(3):
        session.queue({"data": {"id": "sub_1"}})

    context.subscriptions.pause("sub_1")
    context.subscriptions.unpause(Subscription("sub_1"))
    context.subscriptions.change_amount("sub_1", 5000, temporary=True)

    assert [call.data for call in session.calls] == [
        {"pause": "true"},
        {"pause": "false"},
        {"amount": "5000", "amount_change_type": "0"},
    ]
    assert all(call.method == "PUT" for call in session.calls)


def test_webhook_creation_sends_event_array(context, session):
    session.queue(
        {
            "data": {
                "id": "hook_1",
                "url": "https://example.com/hook",
                "event_types": ["transaction.succeeded", "future.event"],
            }
        }
    )

    webhook = context.webhooks.create_url_webhook(
        "https://example.com/hook",
        [WebhookEventType.TRANSACTION_SUCCEEDED, "refund.created"],
    )

    assert session.calls[0].data == {
        "url": "https://example.com/hook",
        "event_types[]": ["transaction.succeeded", "refund.created"],
    }
    assert webhook.event_types == [
        WebhookEventType.TRANSACTION_SUCCEEDED,
        WebhookEventType.UNDEFINED,
    ]


def test_webhook_requires_known_events(context, session):
    with pytest.raises(InvalidArgumentError):
        context.webhooks.create_email_webhook("ops@example.com", [])
    with pytest.raises(InvalidArgumentError):
        context.webhooks.create_email_webhook("ops@example.com", ["no.such.event"])

    assert session.calls == []


def test_payment_create_and_delete(context, session):
    session.queue({"data": {"id": "pay_1", "type": "creditcard", "client": "client_1"}})
    session.queue({"data": []})

    payment = context.payments.create_with_token(TOKEN)
    context.payments.delete(payment)

    assert session.calls[0].data == {"token": TOKEN}
    assert payment.client == "client_1"
    assert (session.calls[1].method, session.calls[1].url) == (
        "DELETE",
        "https://api.test/v2.1/payments/pay_1",
    )


def test_client_create_skips_unset_fields(context, session):
    session.queue({"data": {"id": "client_1", "email": "a@example.com"}})

    context.clients.create(email="a@example.com")

    assert session.calls[0].data == {"email": "a@example.com"}
