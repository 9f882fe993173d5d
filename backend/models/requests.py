from pydantic import BaseModel, Field

from models.schemas.resume_data import ResumeData
from models.schemas.structural_snapshot import StructuralSnapshot


class ATSCheckRequest(BaseModel):
    data: ResumeData
    snapshot: StructuralSnapshot | None = Field(
        default=None, description="Omit when no rendered document exists yet"
    )


class ATSHtmlCheckRequest(BaseModel):
    data: ResumeData
    html: str = Field(..., max_length=500000, description="Rendered resume markup")
    rendered_height_px: int = Field(default=0, ge=0, description="Measured layout height")


class EnhanceRequest(BaseModel):
    resume_text: str = Field(..., min_length=1, max_length=50000, description="Plain text resume content")
