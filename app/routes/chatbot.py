import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlmodel import Session

from app.database import get_session
from app.exceptions import BookstoreError
from app.schemas.chatbot_schemas import ChatRequest, ChatResponse
from app.services.chatbot_service import ERROR_RESPONSE, respond

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/respond", response_model=ChatResponse)
def chatbot_respond(data: ChatRequest, session: Session = Depends(get_session)):
    try:
        reply = respond(session, data.message)
    except BookstoreError:
        raise
    except Exception:
        # the chat widget only knows how to render a "response" field
        logger.exception("Chatbot failed to build a reply")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"response": ERROR_RESPONSE},
        )
    return ChatResponse(response=reply)
