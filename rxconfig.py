import reflex as rx
import os

config = rx.Config(
    app_name="promptforge",
    api_url=os.getenv("PROMPT_API_URL", "http://0.0.0.0:8000"),
    plugins=[rx.plugins.TailwindV3Plugin()],
)
