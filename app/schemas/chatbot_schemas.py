from typing import Optional

from pydantic import BaseModel, model_validator


class ChatRequest(BaseModel):
    message: Optional[str] = None

    @model_validator(mode="after")
    def validate_message(self):
        if not self.message or not self.message.strip():
            raise ValueError("Message is required")
        return self


class ChatResponse(BaseModel):
    response: str
