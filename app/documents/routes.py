from fastapi import APIRouter, HTTPException
from typing import List

from app.documents.schemas import (
    DocumentTemplateResponse, DocumentGenerateRequest, DocumentGenerateResponse
)
from app.services.document_service import (
    DOCUMENT_TEMPLATES, UnknownTemplateError, generate_document, get_template
)

router = APIRouter(prefix="/api/documents", tags=["Documents"])


@router.get("/templates", response_model=List[DocumentTemplateResponse])
def list_templates():
    return DOCUMENT_TEMPLATES


@router.post("/generate", response_model=DocumentGenerateResponse)
def generate(request: DocumentGenerateRequest):
    """Fill a document template with the supplied details."""
    fields = {**request.fields, "full_name": request.full_name}
    try:
        content = generate_document(request.template_id, fields)
    except UnknownTemplateError:
        raise HTTPException(status_code=404, detail="Document template not found")

    return {
        "template_id": request.template_id,
        "name": get_template(request.template_id)["name"],
        "content": content
    }
