import reflex as rx
from pydantic import ValidationError
import json
import logging

from .auth import AuthFailure, get_session, sign_in_with_password, sign_out, sign_up, watch_auth_state
from .client import request_generated_prompt
from .models import LoginForm, SignupForm
from .storage import DEFAULT_USER_NAME, delete_prompt, list_recent_prompts, load_profile_name, save_prompt
from .utils import SITE_URL, get_supabase_client

logger = logging.getLogger(__name__)


class SessionState(rx.State):
    """Keeps the Supabase session tokens in the browser's local storage."""

    access_token: str = rx.LocalStorage("", name="promptforge_access_token")
    refresh_token: str = rx.LocalStorage("", name="promptforge_refresh_token")

    def _client(self):
        return get_supabase_client(self.access_token, self.refresh_token)

    def _remember_session(self, session):
        self.access_token = session.access_token
        self.refresh_token = session.refresh_token

    def _forget_session(self):
        self.access_token = ""
        self.refresh_token = ""

    def _restore_session(self):
        """
        Rebuilds a client from the stored tokens and returns ``(client, session)``,
        or ``(None, None)`` when there is no usable session.

        ``set_session()`` refreshes an expired access token and spends the old
        refresh token, so the tokens of the returned session are always stored.
        """
        if not self.access_token:
            return None, None
        try:
            client = self._client()
            session = get_session(client)
        except Exception as e:
            # Expired or revoked tokens end up here
            logger.info("Stored session could not be restored: %s", e)
            self._forget_session()
            return None, None
        if not session:
            self._forget_session()
            return None, None
        self._remember_session(session)
        return client, session


class AuthState(SessionState):
    is_loading: bool = False

    @rx.event
    def check_session(self):
        _, session = self._restore_session()
        if session:
            return rx.redirect("/dashboard")

    def _sign_in_with(self, action):
        """
        Runs an auth call while listening for auth state changes and returns
        the session the listener saw, if any.
        """
        seen = {}

        def on_auth_state_change(event, session):
            if session:
                seen["session"] = session

        client = get_supabase_client()
        with watch_auth_state(client, on_auth_state_change):
            action(client)
        return seen.get("session")

    @rx.event
    def handle_login(self, form_data: dict):
        try:
            form = LoginForm(email=form_data.get("email", ""), password=form_data.get("password", ""))
        except ValidationError as e:
            yield rx.toast.error(e.errors()[0]["msg"])
            return

        self.is_loading = True
        yield
        try:
            session = self._sign_in_with(
                lambda client: sign_in_with_password(client, form.email, form.password)
            )
            yield rx.toast.success("Logged in successfully!")
            if session:
                self._remember_session(session)
                yield rx.redirect("/dashboard")
        except AuthFailure as e:
            yield rx.toast.error(str(e))
        except Exception:
            logger.exception("Login failed for %s", form.email)
            yield rx.toast.error("An error occurred during login")
        finally:
            self.is_loading = False

    @rx.event
    def handle_signup(self, form_data: dict):
        try:
            form = SignupForm(
                name=form_data.get("name", ""),
                email=form_data.get("email", ""),
                password=form_data.get("password", ""),
            )
        except ValidationError as e:
            yield rx.toast.error(e.errors()[0]["msg"])
            return

        self.is_loading = True
        yield
        try:
            session = self._sign_in_with(
                lambda client: sign_up(client, form.email, form.password, form.name, redirect_to=f"{SITE_URL}/dashboard")
            )
            yield rx.toast.success("Account created successfully!")
            # No session means the project requires email confirmation first
            if session:
                self._remember_session(session)
                yield rx.redirect("/dashboard")
        except AuthFailure as e:
            yield rx.toast.error(str(e))
        except Exception:
            logger.exception("Signup failed for %s", form.email)
            yield rx.toast.error("An error occurred during signup")
        finally:
            self.is_loading = False


class DashboardState(SessionState):
    user_id: str = ""
    user_name: str = DEFAULT_USER_NAME
    user_idea: str = ""
    generated_prompt: str = ""
    recent_prompts: list[dict[str, str]] = []
    is_loading: bool = False

    @rx.event
    def set_user_idea(self, value: str):
        self.user_idea = value

    def _refresh_recent_prompts(self, client):
        self.recent_prompts = [
            prompt.model_dump(mode="json", exclude={"user_id"}) for prompt in list_recent_prompts(client)
        ]

    def _reset_dashboard(self):
        self.user_id = ""
        self.user_name = DEFAULT_USER_NAME
        self.generated_prompt = ""
        self.recent_prompts = []

    def _session_ended(self):
        self._reset_dashboard()
        return rx.redirect("/auth")

    @rx.event
    def load_dashboard(self):
        client, session = self._restore_session()
        if not session:
            return self._session_ended()

        self.user_id = session.user.id
        try:
            self.user_name = load_profile_name(client, self.user_id)
            self._refresh_recent_prompts(client)
        except Exception:
            logger.exception("Failed to load dashboard data for user %s", self.user_id)
            return rx.toast.error("Failed to load your prompts")

    @rx.event
    def handle_generate_prompt(self):
        if not self.user_idea.strip():
            yield rx.toast.error("Please enter your idea first")
            return

        client, session = self._restore_session()
        if not session:
            yield self._session_ended()
            return

        self.is_loading = True
        yield
        try:
            self.generated_prompt = request_generated_prompt(self.user_idea)

            # Save to database
            save_prompt(client, self.user_id, self.user_idea, self.generated_prompt)
            self._refresh_recent_prompts(client)
            yield rx.toast.success("Prompt generated successfully!")
        except Exception:
            logger.exception("Prompt generation failed for user %s", self.user_id)
            yield rx.toast.error("Failed to generate prompt")
        finally:
            self.is_loading = False

    @rx.event
    def copy_prompt(self, text: str):
        return [rx.set_clipboard(text), rx.toast.success("Copied to clipboard!")]

    @rx.event
    def share_prompt(self, text: str):
        # Web Share API where the browser has it, clipboard otherwise
        payload = json.dumps(text)
        script = (
            "navigator.share"
            f" ? navigator.share({{text: {payload}}}).then(() => 'shared')"
            f".catch(() => navigator.clipboard.writeText({payload}).then(() => 'copied'))"
            f" : navigator.clipboard.writeText({payload}).then(() => 'copied')"
        )
        return rx.call_script(script, callback=DashboardState.share_finished)

    @rx.event
    def share_finished(self, outcome: str):
        if outcome == "shared":
            return rx.toast.success("Shared successfully!")
        return rx.toast.success("Copied to clipboard!")

    @rx.event
    def handle_delete(self, prompt_id: str):
        client, session = self._restore_session()
        if not session:
            return self._session_ended()
        try:
            delete_prompt(client, prompt_id)
        except Exception:
            logger.exception("Failed to delete prompt %s", prompt_id)
            return rx.toast.error("Failed to delete prompt")
        self.recent_prompts = [p for p in self.recent_prompts if p["id"] != prompt_id]
        return rx.toast.success("Prompt deleted")

    @rx.event
    def handle_logout(self):
        try:
            sign_out(self._client())
        except Exception as e:
            logger.warning("Sign out call failed, clearing local session anyway: %s", e)
        self._forget_session()
        self._reset_dashboard()
        return rx.redirect("/")
