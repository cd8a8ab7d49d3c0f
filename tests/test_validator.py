import pytest

from contact_form.state import FormState
from contact_form.validator import FormValidator


@pytest.fixture
def validator():
    return FormValidator()


@pytest.mark.parametrize("value", ["", " ", "\t\n", "   "])
def test_is_blank_for_whitespace(value):
    assert FormValidator.is_blank(value)


def test_is_blank_false_for_text():
    assert not FormValidator.is_blank(" a ")


def test_names_required(validator):
    out = validator.validate_fields(FormState(first_name="", last_name="x"))
    assert out.is_valid_name is False

    out = validator.validate_fields(FormState(first_name="Ada", last_name="  "))
    assert out.is_valid_name is False

    out = validator.validate_fields(FormState(first_name="Ada", last_name="L"))
    assert out.is_valid_name is True


def test_phone_required(validator):
    assert validator.validate_fields(FormState(phone="")).is_valid_phone is False
    assert validator.validate_fields(FormState(phone="123")).is_valid_phone is True


@pytest.mark.parametrize(
    "email, expected",
    [
        ("a@b.c", True),
        ("abc", False),
        ("a@b", False),
        ("a.b", False),
        ("@.", True),
        ("", False),
    ],
)
def test_email_substring_check(validator, email, expected):
    assert validator.validate_fields(FormState(email=email)).is_valid_email is expected


def test_validate_does_not_touch_inputs_or_full_name(validator):
    state = FormState(first_name=" Ada ", phone=" 1 ", full_name="stale")
    out = validator.validate_fields(state)

    assert out.first_name == " Ada "
    assert out.phone == " 1 "
    assert out.full_name == "stale"


def test_should_summarize_routes_on_name_flag():
    assert FormValidator.should_summarize(FormState(is_valid_name=True)) == "summarize"
    assert FormValidator.should_summarize(FormState(is_valid_name=False)) == "clear"


def test_compose_and_clear_full_name():
    state = FormState(first_name="Ada", last_name="Lovelace")
    assert FormValidator.compose_full_name(state).full_name == "Ada Lovelace"
    assert FormValidator.clear_full_name(state.model_copy(update={"full_name": "x"})).full_name == ""
