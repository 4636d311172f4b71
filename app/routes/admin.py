from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.database import get_session
from app.services.stats_service import get_stats
from app.utils.token import get_current_user

router = APIRouter()


@router.get("/stats", dependencies=[Depends(get_current_user)])
def stats(session: Session = Depends(get_session)):
    return get_stats(session)
