from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import pytest

from paymill_payments.core.fields import (
    ENUM,
    WireField,
    from_epoch,
    to_epoch,
    to_form,
)
from paymill_payments.core.model import Resource, resolve_model


def test_epoch_round_trip_is_exact_to_the_second():
    moment = datetime(2024, 3, 1, 12, 30, 15, tzinfo=timezone.utc)

    assert to_epoch(moment) == 1709296215
    assert from_epoch(1709296215) == moment
    assert from_epoch("1709296215") == moment


@pytest.mark.parametrize("raw", [None, "", 0, "0", -5])
def test_missing_or_non_positive_epoch_reads_as_unset(raw):
    assert from_epoch(raw) is None


def test_epoch_at_or_before_1970_writes_as_unset():
    assert to_epoch(datetime(1970, 1, 1, tzinfo=timezone.utc)) is None
    assert to_epoch(None) is None


def test_naive_datetime_is_read_as_utc():
    assert to_epoch(datetime(2024, 1, 1)) == 1704067200


def test_wire_name_defaults_to_attribute():
    assert WireField("trial_period_days").name == "trial_period_days"
    assert WireField("fraud", wire="is_fraud").name == "is_fraud"


def test_kind_requiring_target_is_rejected():
    with pytest.raises(TypeError):
        WireField("status", kind=ENUM)


def test_unknown_kind_is_rejected():
    with pytest.raises(TypeError):
        WireField("status", kind="money")


def test_updateable_field_without_wire_name_fails_at_definition():
    with pytest.raises(TypeError, match="no wire name"):

        @dataclass
        class BrokenRename(Resource):
            name: Optional[str] = None

            WIRE_FIELDS = (WireField("id"), WireField("name", wire="", updateable=True))


def test_field_table_must_name_real_attributes():
    with pytest.raises(TypeError, match="unknown attribute"):

        @dataclass
        class BrokenTable(Resource):
            name: Optional[str] = None

            WIRE_FIELDS = (WireField("id"), WireField("nickname"))


def test_models_register_by_class_name():
    from paymill_payments.models import Transaction

    assert resolve_model("Transaction") is Transaction
    with pytest.raises(LookupError):
        resolve_model("Merchant")


def test_to_form_flattens_lists_and_booleans():
    form = to_form(
        {
            "url": "https://example.com/hook",
            "event_types": ["transaction.created", "refund.created"],
            "active": False,
            "amount": 4200,
            "description": None,
        }
    )

    assert form == {
        "url": "https://example.com/hook",
        "event_types[]": ["transaction.created", "refund.created"],
        "active": "false",
        "amount": "4200",
    }
