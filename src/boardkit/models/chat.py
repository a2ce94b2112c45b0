"""Chat transcript models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

SENDER_USER = "user"
SENDER_ASSISTANT = "assistant"

# Older transcripts recorded assistant replies as "ai"
_SENDER_ALIASES = {"ai": SENDER_ASSISTANT}

Sender = Literal["user", "assistant"]


class ChatMessage(BaseModel):
    """One entry of the assistant chat transcript."""

    model_config = ConfigDict(frozen=True)

    id: str
    sender: Sender
    content: str
    timestamp: int  # ms since epoch

    @field_validator("sender", mode="before")
    @classmethod
    def _resolve_alias(cls, v: str) -> str:
        if isinstance(v, str):
            return _SENDER_ALIASES.get(v, v)
        return v
