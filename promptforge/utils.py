from supabase import create_client, Client
from dotenv import load_dotenv
import logging
import os

load_dotenv()

SUPABASE_URL = os.getenv("SUPABASE_URL", "YOUR_SUPABASE_URL_HERE")
SUPABASE_KEY = os.getenv("SUPABASE_ANON_KEY", "YOUR_SUPABASE_KEY_HERE")
# Where the dashboard reaches the generate-prompt endpoint. Same process by default.
PROMPT_API_URL = os.getenv("PROMPT_API_URL", "http://0.0.0.0:8000")
# Used for the email confirmation redirect after signup.
SITE_URL = os.getenv("SITE_URL", "http://localhost:3000")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    else:
        root.setLevel(level.upper())


def get_supabase_client(access_token: str = "", refresh_token: str = "") -> Client:
    """
    Returns a fresh Supabase client. When tokens are given the client acts
    on behalf of that signed-in user, so row level security applies.
    """
    # Ensure that SUPABASE_URL and SUPABASE_KEY are not the placeholder values
    if SUPABASE_URL == "YOUR_SUPABASE_URL_HERE" or SUPABASE_KEY == "YOUR_SUPABASE_KEY_HERE":
        raise ValueError("Supabase URL or Key is not configured. Please set the environment variables.")
    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    if access_token and refresh_token:
        client.auth.set_session(access_token, refresh_token)
    return client
