from pydantic import BaseModel, Field
from datetime import datetime
from app.models import MessageSender

class ChatConversationCreate(BaseModel):
    user_id: int
    title: str = Field(..., min_length=1, max_length=255)

class ChatConversationResponse(ChatConversationCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True

class ChatMessageCreate(BaseModel):
    content: str = Field(..., min_length=1)

class ChatMessageResponse(BaseModel):
    id: int
    conversation_id: int
    sender: MessageSender
    content: str
    created_at: datetime

    class Config:
        from_attributes = True

class ChatExchangeResponse(BaseModel):
    user_message: ChatMessageResponse
    ai_message: ChatMessageResponse

class AssistantRequest(BaseModel):
    message: str = Field(..., min_length=1, description="Question for the legal assistant")

class AssistantResponse(BaseModel):
    response: str
