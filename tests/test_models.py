import pytest
from pydantic import ValidationError

from promptforge.models import GeneratePromptRequest, LoginForm, Prompt, SignupForm


def first_error(exc_info) -> str:
    return exc_info.value.errors()[0]["msg"]


def test_signup_form_trims_values():
    form = SignupForm(name="  Ada Lovelace ", email=" ada@example.com ", password="secret1")
    assert form.name == "Ada Lovelace"
    assert form.email == "ada@example.com"


@pytest.mark.parametrize(
    "data, message",
    [
        ({"name": " A ", "email": "a@b.co", "password": "secret1"}, "Name must be at least 2 characters"),
        ({"name": "Ada", "email": "not-an-email", "password": "secret1"}, "Invalid email address"),
        ({"name": "Ada", "email": "a@b.co", "password": "12345"}, "Password must be at least 6 characters"),
    ],
)
def test_signup_form_messages(data, message):
    with pytest.raises(ValidationError) as exc_info:
        SignupForm(**data)
    assert first_error(exc_info) == message


def test_signup_form_rejects_long_name():
    with pytest.raises(ValidationError):
        SignupForm(name="x" * 101, email="a@b.co", password="secret1")


def test_login_form_requires_password():
    with pytest.raises(ValidationError) as exc_info:
        LoginForm(email="ada@example.com", password="")
    assert first_error(exc_info) == "Password is required"


def test_login_form_rejects_bad_email():
    with pytest.raises(ValidationError) as exc_info:
        LoginForm(email="ada@", password="x")
    assert first_error(exc_info) == "Invalid email address"


def test_generate_request_does_not_coerce_numbers():
    with pytest.raises(ValidationError):
        GeneratePromptRequest.model_validate_json('{"userIdea": 5}')


def test_prompt_parses_supabase_row():
    row = {
        "id": "5f0c",
        "user_id": "u1",
        "user_idea": "idea",
        "generated_prompt": "prompt",
        "created_at": "2025-01-02T03:04:05.123456+00:00",
    }
    prompt = Prompt(**row)
    assert prompt.created_at.year == 2025
