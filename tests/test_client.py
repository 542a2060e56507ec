from unittest.mock import MagicMock

import pytest
import requests

from promptforge import client as prompt_client


def fake_response(status_code, payload):
    response = MagicMock(status_code=status_code, text=str(payload))
    response.json.return_value = payload
    return response


def test_request_generated_prompt_posts_idea(monkeypatch):
    post = MagicMock(return_value=fake_response(200, {"generatedPrompt": "Task: x"}))
    monkeypatch.setattr(prompt_client.requests, "post", post)

    assert prompt_client.request_generated_prompt("x", base_url="http://api.local/") == "Task: x"
    post.assert_called_once_with(
        "http://api.local/generate-prompt",
        json={"userIdea": "x"},
        timeout=prompt_client.REQUEST_TIMEOUT_SECONDS,
    )


def test_request_generated_prompt_raises_on_error_status(monkeypatch):
    post = MagicMock(return_value=fake_response(400, {"error": "User idea is required"}))
    monkeypatch.setattr(prompt_client.requests, "post", post)

    with pytest.raises(prompt_client.PromptServiceError, match="User idea is required"):
        prompt_client.request_generated_prompt(" ", base_url="http://api.local")


def test_request_generated_prompt_wraps_transport_errors(monkeypatch):
    post = MagicMock(side_effect=requests.exceptions.ConnectionError("refused"))
    monkeypatch.setattr(prompt_client.requests, "post", post)

    with pytest.raises(prompt_client.PromptServiceError, match="unreachable"):
        prompt_client.request_generated_prompt("x", base_url="http://api.local")
