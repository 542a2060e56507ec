"""Thin wrappers around Supabase Auth used by the auth and dashboard pages."""

from contextlib import contextmanager
from typing import Callable, Iterator
import logging

from supabase import AuthError, Client

logger = logging.getLogger(__name__)


class AuthFailure(Exception):
    """Auth call rejected; ``str(exc)`` is safe to show to the user."""


def _friendly_message(error: AuthError) -> str:
    message = str(error)
    if "already registered" in message:
        return "Email already registered. Please sign in instead."
    if "Invalid login credentials" in message:
        return "Invalid email or password"
    return message


def get_session(client: Client):
    return client.auth.get_session()


@contextmanager
def watch_auth_state(client: Client, callback: Callable) -> Iterator[None]:
    """
    Subscribes ``callback(event, session)`` to auth state changes for the
    duration of the block. The subscription is always released on exit.
    """
    subscription = client.auth.on_auth_state_change(callback)
    try:
        yield
    finally:
        subscription.unsubscribe()


def sign_up(client: Client, email: str, password: str, name: str, redirect_to: str | None = None):
    options = {"data": {"name": name}}
    if redirect_to:
        options["email_redirect_to"] = redirect_to
    try:
        return client.auth.sign_up({"email": email, "password": password, "options": options})
    except AuthError as e:
        logger.info("Sign up rejected for %s: %s", email, e)
        raise AuthFailure(_friendly_message(e)) from e


def sign_in_with_password(client: Client, email: str, password: str):
    try:
        return client.auth.sign_in_with_password({"email": email, "password": password})
    except AuthError as e:
        logger.info("Sign in rejected for %s: %s", email, e)
        raise AuthFailure(_friendly_message(e)) from e


def sign_out(client: Client) -> None:
    client.auth.sign_out()
