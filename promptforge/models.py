from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError
from datetime import datetime
import re

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Prompt(BaseModel):
    id: str
    user_id: str | None = None
    user_idea: str
    generated_prompt: str
    created_at: datetime


class Profile(BaseModel):
    id: str
    name: str


class GeneratePromptRequest(BaseModel):
    # Non-string values fail validation instead of being coerced.
    model_config = ConfigDict(strict=True)

    userIdea: str | None = None


class GeneratePromptResponse(BaseModel):
    generatedPrompt: str


def _check_email(value: str) -> str:
    value = value.strip()
    if not EMAIL_PATTERN.match(value):
        raise PydanticCustomError("invalid_email", "Invalid email address")
    return value


class SignupForm(BaseModel):
    name: str
    email: str
    password: str

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 2:
            raise PydanticCustomError("name_too_short", "Name must be at least 2 characters")
        if len(value) > 100:
            raise PydanticCustomError("name_too_long", "Name must be at most 100 characters")
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        value = _check_email(value)
        if len(value) > 255:
            raise PydanticCustomError("email_too_long", "Email must be at most 255 characters")
        return value

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if len(value) < 6:
            raise PydanticCustomError("password_too_short", "Password must be at least 6 characters")
        if len(value) > 100:
            raise PydanticCustomError("password_too_long", "Password must be at most 100 characters")
        return value


class LoginForm(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("password_required", "Password is required")
        return value
