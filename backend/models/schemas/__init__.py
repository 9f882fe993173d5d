"""Pydantic contracts shared by the ATS checker and the content generator."""

from models.schemas.finding import Finding, Severity
from models.schemas.resume_data import EducationEntry, ExperienceEntry, ResumeData
from models.schemas.structural_snapshot import StructuralSnapshot

__all__ = [
    "EducationEntry",
    "ExperienceEntry",
    "Finding",
    "ResumeData",
    "Severity",
    "StructuralSnapshot",
]
