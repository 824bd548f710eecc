import logging

import pytest
import requests

from paymill_payments.core.client import PaymillClient
from paymill_payments.core.errors import (
    AuthenticationError,
    NotFoundError,
    ServerError,
    TransportError,
    ValidationError,
)


def test_request_sends_basic_auth_and_timeout(config, session):
    session.queue({"data": {"id": "offer_1"}, "mode": "test"})
    client = PaymillClient(config, session=session)

    body = client.request("GET", "offers/offer_1")

    assert body["data"] == {"id": "offer_1"}
    call = session.calls[0]
    assert call.method == "GET"
    assert call.url == "https://api.test/v2.1/offers/offer_1"
    assert call.auth == ("test_private_key", "")
    assert call.timeout == 5
    assert call.params is None
    assert call.data is None


def test_request_logs_without_leaking_key(config, session, caplog):
    session.queue({"data": []})
    client = PaymillClient(config, session=session)

    with caplog.at_level(logging.DEBUG):
        client.request("GET", "offers", params={"order": "amount_desc"})

    assert "GET https://api.test/v2.1/offers" in caplog.text
    assert "amount_desc" in caplog.text
    assert "test_private_key" not in caplog.text


def test_not_found_keeps_server_message(config, session):
    session.queue(
        {"error": "Transaction not found", "exception": "transaction_not_found"},
        status=404,
    )
    client = PaymillClient(config, session=session)

    with pytest.raises(NotFoundError) as excinfo:
        client.request("GET", "transactions/tran_missing")

    assert excinfo.value.status == 404
    assert excinfo.value.message == "Transaction not found"
    assert excinfo.value.code == "transaction_not_found"
    assert str(excinfo.value) == "404 transaction_not_found: Transaction not found"


@pytest.mark.parametrize("status", [401, 403])
def test_auth_failures(config, session, status):
    session.queue({"error": "Access Denied"}, status=status)

    with pytest.raises(AuthenticationError):
        PaymillClient(config, session=session).request("GET", "clients")


def test_field_validation_messages_are_joined(config, session):
    session.queue(
        {"error": {"messages": {"regexNotMatch": "'xx' does not match"}, "field": "currency"}},
        status=400,
    )

    with pytest.raises(ValidationError) as excinfo:
        PaymillClient(config, session=session).request("POST", "offers", data={"currency": "xx"})

    assert excinfo.value.message == "regexNotMatch: 'xx' does not match"


def test_unexpected_client_error_counts_as_validation(config, session):
    session.queue(None, status=412, text="Precondition Failed")

    with pytest.raises(ValidationError) as excinfo:
        PaymillClient(config, session=session).request("POST", "transactions")

    assert excinfo.value.message == "Precondition Failed"
    assert excinfo.value.body == {}


def test_server_errors(config, session):
    session.queue(None, status=503, text="")

    with pytest.raises(ServerError) as excinfo:
        PaymillClient(config, session=session).request("GET", "clients")

    assert excinfo.value.message == "HTTP 503"


def test_network_failure_becomes_transport_error(config, session):
    session.queue_error(requests.ConnectionError("connection refused"))

    with pytest.raises(TransportError, match="connection refused"):
        PaymillClient(config, session=session).request("GET", "clients")


def test_unparseable_success_body_is_a_transport_error(config, session):
    session.queue(None, status=200, text="<html>maintenance</html>")

    with pytest.raises(TransportError, match="maintenance"):
        PaymillClient(config, session=session).request("GET", "clients")


def test_client_closes_session(config, session):
    with PaymillClient(config, session=session):
        pass

    assert session.closed
