import requests

from .utils import PROMPT_API_URL

REQUEST_TIMEOUT_SECONDS = 15


class PromptServiceError(Exception):
    pass


def request_generated_prompt(user_idea: str, base_url: str = PROMPT_API_URL) -> str:
    """POSTs the idea to the generate-prompt endpoint and returns the prompt text."""
    try:
        response = requests.post(
            f"{base_url.rstrip('/')}/generate-prompt",
            json={"userIdea": user_idea},
            timeout=REQUEST_TIMEOUT_SECONDS,
        )
    except requests.exceptions.RequestException as e:
        raise PromptServiceError(f"Prompt service unreachable: {e}") from e

    if response.status_code != 200:
        try:
            detail = response.json().get("error", response.text)
        except ValueError:
            detail = response.text
        raise PromptServiceError(f"Prompt service returned {response.status_code}: {detail}")

    return response.json()["generatedPrompt"]
