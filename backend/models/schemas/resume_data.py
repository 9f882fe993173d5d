"""Structured resume produced by the content generator.

The generator may fill a "raw" and an "enhanced" variant of experience,
skills and education. Both names are accepted in snake_case and in the
generator's camelCase (``enhancedExperience``, ``fullName``, ...).
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_MODEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "extra": "ignore",
}


class ExperienceEntry(BaseModel):
    """A single work experience entry."""
    title: str | None = ""
    company: str | None = ""
    duration: str | None = ""
    description: str | None = ""
    bullets: list[str] | None = None

    model_config = _MODEL_CONFIG


class EducationEntry(BaseModel):
    """A single education entry."""
    degree: str | None = ""
    school: str | None = ""
    year: str | None = ""

    model_config = _MODEL_CONFIG


class ResumeData(BaseModel):
    full_name: str | None = ""
    job_title: str | None = ""
    email: str | None = ""
    phone: str | None = ""
    location: str | None = ""
    summary: str | None = None

    experience: list[ExperienceEntry] | None = Field(default_factory=list)
    enhanced_experience: list[ExperienceEntry] | None = Field(default_factory=list)
    skills: list[str] | None = Field(default_factory=list)
    enhanced_skills: list[str] | None = Field(default_factory=list)
    education: list[EducationEntry] | None = Field(default_factory=list)
    enhanced_education: list[EducationEntry] | None = Field(default_factory=list)

    model_config = _MODEL_CONFIG
