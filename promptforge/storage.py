from supabase import Client

from .models import Prompt

RECENT_PROMPTS_LIMIT = 5
DEFAULT_USER_NAME = "User"


def load_profile_name(client: Client, user_id: str) -> str:
    response = client.table("profiles").select("name").eq("id", user_id).maybe_single().execute()
    # maybe_single() returns None instead of a response on some client versions
    if response is not None and response.data and response.data.get("name"):
        return response.data["name"]
    return DEFAULT_USER_NAME


def list_recent_prompts(client: Client, limit: int = RECENT_PROMPTS_LIMIT) -> list[Prompt]:
    response = client.table("prompts").select("*").order("created_at", desc=True).limit(limit).execute()
    return [Prompt(**row) for row in response.data or []]


def save_prompt(client: Client, user_id: str, user_idea: str, generated_prompt: str) -> Prompt | None:
    insert_data = {
        "user_id": user_id,
        "user_idea": user_idea,
        "generated_prompt": generated_prompt,
    }
    response = client.table("prompts").insert(insert_data).execute()
    if response.data:
        return Prompt(**response.data[0])
    return None


def delete_prompt(client: Client, prompt_id: str) -> None:
    client.table("prompts").delete().eq("id", prompt_id).execute()
