from pydantic import BaseModel, Field
from typing import Dict

class DocumentTemplateResponse(BaseModel):
    id: str
    name: str
    category: str

class DocumentGenerateRequest(BaseModel):
    template_id: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1, max_length=255)
    fields: Dict[str, str] = Field(default_factory=dict, description="Template specific values, e.g. age, address, city")

class DocumentGenerateResponse(BaseModel):
    template_id: str
    name: str
    content: str
