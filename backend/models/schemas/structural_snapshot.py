"""Point-in-time structure of a rendered resume document."""

from pydantic import BaseModel, Field


class StructuralSnapshot(BaseModel):
    """Element counts and height measured on the rendered document.

    A missing snapshot (None) means nothing has been rendered yet; an
    all-zero snapshot means a rendered document with none of these elements.
    """
    image_count: int = Field(default=0, ge=0)
    table_count: int = Field(default=0, ge=0)
    vector_icon_count: int = Field(default=0, ge=0)
    rendered_height_px: int = Field(default=0, ge=0)  # 0 if unknown
