import io
import json

import paymill_payments.cli as cli_mod


def _run(tmp_path, *args):
    out = io.StringIO()
    argv = [
        "--env-file",
        str(tmp_path / "missing.env"),
        "--set",
        "PAYMILL_API_KEY=cli-key",
        "--set",
        "PAYMILL_API_URL=https://api.test/v2.1",
        *args,
    ]
    return cli_mod.run_cli(argv, out=out), out.getvalue()


def test_list_prints_wire_json(tmp_path, cli_session):
    cli_session.queue(
        {"data": [{"id": "offer_1", "amount": "4200", "interval": "1 MONTH"}], "data_count": 1}
    )

    code, output = _run(tmp_path, "offers", "list", "--order", "amount", "--desc", "--count", "5")

    assert code == 0
    call = cli_session.calls[0]
    assert call.url == "https://api.test/v2.1/offers"
    assert call.params == {"order": "amount_desc", "count": 5}
    assert call.auth == ("cli-key", "")
    assert json.loads(output) == {
        "data": [{"id": "offer_1", "amount": 4200, "interval": "1 MONTH"}],
        "data_count": 1,
    }
    assert cli_session.closed


def test_get_prints_single_resource(tmp_path, cli_session):
    cli_session.queue({"data": {"id": "hook_1", "event_types": ["refund.created"]}})

    code, output = _run(tmp_path, "webhooks", "get", "--id", "hook_1")

    assert code == 0
    assert json.loads(output) == {"data": {"id": "hook_1", "event_types": ["refund.created"]}}


def test_delete_is_refused_for_transactions(tmp_path, cli_session):
    code, output = _run(tmp_path, "transactions", "delete", "--id", "tran_1")

    assert code == 1
    assert output == ""
    assert cli_session.calls == []


def test_get_without_id_fails(tmp_path, cli_session):
    code, _ = _run(tmp_path, "clients", "get")

    assert code == 1
    assert cli_session.calls == []


def test_unknown_sort_field_fails(tmp_path, cli_session):
    code, _ = _run(tmp_path, "webhooks", "list", "--order", "amount")

    assert code == 1


def test_api_errors_return_failure(tmp_path, cli_session):
    cli_session.queue({"error": "Access Denied"}, status=401)

    code, _ = _run(tmp_path, "clients", "list")

    assert code == 1


def test_missing_key_is_a_configuration_error(tmp_path, cli_session):
    code = cli_mod.run_cli(
        ["--env-file", str(tmp_path / "missing.env"), "clients", "list"], out=io.StringIO()
    )

    assert code == 1
    assert cli_session.calls == []
