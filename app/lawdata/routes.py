from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List
from app.database import get_db
from app.auth.dependencies import require_admin
from app.lawdata.schemas import LawDataCreate, LawDataResponse

router = APIRouter(prefix="/api/law-data", tags=["Law Data"])


# Declared before /{code} so "search" is not taken as a code
@router.get("/search", response_model=List[LawDataResponse])
def search_law_data(q: str = Query("", description="Text to look for in code, section, title or description"), db=Depends(get_db)):
    if not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")
    return db.search_law_data(q.strip())


@router.get("/{code}", response_model=LawDataResponse)
def get_law_data(code: str, db=Depends(get_db)):
    """Look up a law section by code, e.g. IPC302 (case-insensitive)."""
    law = db.get_law_data(code)
    if not law:
        raise HTTPException(status_code=404, detail="Law data not found")
    return law


@router.post("", response_model=LawDataResponse, status_code=status.HTTP_201_CREATED)
def create_law_data(
    law_data: LawDataCreate,
    current_user=Depends(require_admin()),
    db=Depends(get_db)
):
    if db.get_law_data(law_data.code):
        raise HTTPException(status_code=400, detail="Law code already exists")
    return db.create_law_data(law_data.dict())
