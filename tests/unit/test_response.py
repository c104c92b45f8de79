"""Unit tests for parsing SIPS binary output."""

from sips_gateway.domain.entities import PAYMENT_FIELDS, REQUEST_FIELDS, Response


def test_success_record():
    response = Response.from_output("0!OK!12345")

    assert response.status == "0"
    assert response.error == "OK"
    assert response.fields == ("0", "OK", "12345")
    assert not response.is_error


def test_error_record():
    response = Response.from_output("12!Declined")

    assert response.is_error
    assert response.status == "12"
    assert response.error == "Declined"


def test_wrapped_record_drops_outer_empty_fields():
    response = Response.from_output("!0!!<form action='x'></form>!\n")

    assert response.fields == ("0", "", "<form action='x'></form>")
    assert response.to_dict(REQUEST_FIELDS) == {
        "code": "0",
        "error": "",
        "message": "<form action='x'></form>",
    }


def test_empty_output_is_an_error():
    response = Response.from_output("")

    assert response.status == ""
    assert response.is_error


def test_get_out_of_range():
    response = Response.from_output("0!OK")

    assert response.get(1) == "OK"
    assert response.get(5) is None
    assert response.get(5, "") == ""
    assert response.get(-1) is None


def test_payment_layout_pads_missing_fields():
    response = Response.from_output("!0!!014213245611111!fr!2500!123456!CB!")
    named = response.to_dict(PAYMENT_FIELDS)

    assert named["merchant_id"] == "014213245611111"
    assert named["amount"] == "2500"
    assert named["transaction_id"] == "123456"
    assert named["payment_means"] == "CB"
    assert named["response_code"] == ""
    assert len(named) == len(PAYMENT_FIELDS)


def test_minus_one_status_is_an_error():
    response = Response.from_output("!-1!Erreur appel API : pathfile invalide!!")

    assert response.is_error
    assert response.status == "-1"
    assert response.error == "Erreur appel API : pathfile invalide"
