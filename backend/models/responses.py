from pydantic import BaseModel

from models.schemas.finding import Finding, Severity
from models.schemas.resume_data import ResumeData


class FindingGroup(BaseModel):
    severity: Severity
    findings: list[Finding] = []


class ATSReport(BaseModel):
    compatible: bool = True
    total: int = 0
    headline: str = ""
    headline_alt: str = ""
    groups: list[FindingGroup] = []


class EnhanceResponse(BaseModel):
    resume: ResumeData
    report: ATSReport
