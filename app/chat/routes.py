from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List
import logging

from app.database import get_db
from app.models import MessageSender
from app.chat.schemas import (
    ChatConversationCreate, ChatConversationResponse,
    ChatMessageCreate, ChatMessageResponse, ChatExchangeResponse,
    AssistantRequest, AssistantResponse
)
from app.services.chat_service import ChatServiceError, get_chat_responder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["Legal Assistant"])


@router.get("/conversations", response_model=List[ChatConversationResponse])
def list_conversations(user_id: int = Query(..., alias="userId"), db=Depends(get_db)):
    """Conversations of a user, newest first."""
    return db.get_chat_conversations(user_id)


@router.post("/conversations", response_model=ChatConversationResponse, status_code=status.HTTP_201_CREATED)
def create_conversation(conversation_data: ChatConversationCreate, db=Depends(get_db)):
    if not db.get_user(conversation_data.user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return db.create_chat_conversation(conversation_data.dict())


@router.get("/conversations/{conversation_id}/messages", response_model=List[ChatMessageResponse])
def list_messages(conversation_id: int, db=Depends(get_db)):
    return db.get_chat_messages(conversation_id)


@router.post(
    "/conversations/{conversation_id}/messages",
    response_model=ChatExchangeResponse,
    status_code=status.HTTP_201_CREATED
)
def post_message(
    conversation_id: int,
    message_data: ChatMessageCreate,
    db=Depends(get_db),
    responder=Depends(get_chat_responder)
):
    """Store the user's message and the assistant's reply."""
    if not db.get_chat_conversation(conversation_id):
        raise HTTPException(status_code=404, detail="Conversation not found")

    user_message = db.create_chat_message({
        "conversation_id": conversation_id,
        "sender": MessageSender.USER,
        "content": message_data.content
    })

    history = [
        {"role": msg.sender.value, "content": msg.content}
        for msg in db.get_chat_messages(conversation_id)
    ]

    try:
        reply = responder(history)
    except ChatServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))

    ai_message = db.create_chat_message({
        "conversation_id": conversation_id,
        "sender": MessageSender.ASSISTANT,
        "content": reply
    })

    return {"user_message": user_message, "ai_message": ai_message}


@router.post("/ai", response_model=AssistantResponse)
def ask_assistant(request: AssistantRequest, responder=Depends(get_chat_responder)):
    """One-off question for the floating chat widget; nothing is stored."""
    try:
        reply = responder([{"role": "user", "content": request.message}])
    except ChatServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {"response": reply}
