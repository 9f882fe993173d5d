"""Rule-based ATS compatibility checker.

Structural checks (images, tables, page length, icons) run only when a
snapshot of the rendered document is available. Content checks
(measurable achievements, summary, skills, education) always run.
Findings come back in rule order; the function is pure and never raises.
"""

import logging
import math
import re
from typing import TypeVar

from models.schemas.finding import Finding, Severity
from models.schemas.resume_data import ExperienceEntry, ResumeData
from models.schemas.structural_snapshot import StructuralSnapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")

PAGE_HEIGHT_PX = 1123  # A4 height at the renderer's scale
MAX_PAGES = 2
MIN_SUMMARY_CHARS = 30
MIN_SKILLS = 5

_DIGIT_RE = re.compile(r"\d")


def select_active(enhanced: list[T] | None, raw: list[T] | None) -> list[T]:
    """Return the enhanced list when non-empty, otherwise the raw list."""
    if enhanced:
        return enhanced
    return raw or []


def estimate_pages(rendered_height_px: int, page_height_px: int = PAGE_HEIGHT_PX) -> int:
    return math.ceil(rendered_height_px / page_height_px)


def has_quantifiable_signal(entry: ExperienceEntry) -> bool:
    """True if the entry's bullets or description contain a digit."""
    text = " ".join(entry.bullets or []) + " " + (entry.description or "")
    return bool(_DIGIT_RE.search(text))


def validate(
    snapshot: StructuralSnapshot | None,
    data: ResumeData,
    page_height_px: int = PAGE_HEIGHT_PX,
) -> list[Finding]:
    """Check a rendered resume and its data for ATS compatibility."""
    findings: list[Finding] = []

    if snapshot is not None:
        findings.extend(_structural_findings(snapshot, page_height_px))

    experience = select_active(data.enhanced_experience, data.experience)
    skills = select_active(data.enhanced_skills, data.skills)
    education = select_active(data.enhanced_education, data.education)

    if experience and not any(has_quantifiable_signal(e) for e in experience):
        findings.append(Finding(
            severity=Severity.SUGGESTION,
            message="لا توجد أرقام أو نسب في خبراتك. أضف إنجازات قابلة للقياس (مثل: زيادة 25%).",
            message_alt="No numbers found in experience. Add measurable achievements (e.g., increased by 25%).",
        ))

    if not data.summary or len(data.summary) < MIN_SUMMARY_CHARS:
        findings.append(Finding(
            severity=Severity.SUGGESTION,
            message="الملخص المهني قصير جداً. يُفضل 3-4 أسطر تبرز خبراتك وإنجازاتك.",
            message_alt="Professional summary is too short. Recommended: 3-4 lines highlighting your expertise.",
        ))

    if len(skills) < MIN_SKILLS:
        findings.append(Finding(
            severity=Severity.SUGGESTION,
            message="عدد المهارات قليل. أضف 8-15 مهارة تتناسب مع الوظيفة المستهدفة.",
            message_alt="Too few skills. Add 8-15 skills relevant to the target job.",
        ))

    if not education:
        findings.append(Finding(
            severity=Severity.WARNING,
            message="لا يوجد قسم تعليم. معظم أنظمة ATS تبحث عن المؤهلات العلمية.",
            message_alt="No education section. Most ATS systems look for educational qualifications.",
        ))

    logger.debug(
        "ATS validation: %d findings (snapshot=%s)",
        len(findings), "yes" if snapshot is not None else "no",
    )
    return findings


def _structural_findings(snapshot: StructuralSnapshot, page_height_px: int) -> list[Finding]:
    findings: list[Finding] = []

    if snapshot.image_count > 0:
        findings.append(Finding(
            severity=Severity.ERROR,
            message="يوجد صور في السيرة الذاتية. أنظمة ATS لا تقرأ الصور.",
            message_alt="Images detected. ATS systems cannot read images.",
        ))

    if snapshot.table_count > 0:
        findings.append(Finding(
            severity=Severity.ERROR,
            message="يوجد جداول في السيرة الذاتية. أنظمة ATS تواجه صعوبة في قراءة الجداول.",
            message_alt="Tables detected. ATS systems struggle with tables.",
        ))

    pages = estimate_pages(snapshot.rendered_height_px, page_height_px)
    if pages > MAX_PAGES:
        findings.append(Finding(
            severity=Severity.WARNING,
            message=f"السيرة الذاتية تقريباً {pages} صفحات. يُفضل أن لا تتجاوز صفحتين.",
            message_alt=f"CV is approximately {pages} pages. Recommended: max {MAX_PAGES} pages.",
        ))

    if snapshot.vector_icon_count > 0:
        findings.append(Finding(
            severity=Severity.WARNING,
            message="يوجد أيقونات في السيرة. بعض أنظمة ATS لا تتعامل معها بشكل صحيح.",
            message_alt="Icons detected. Some ATS systems may not handle them correctly.",
        ))

    return findings
