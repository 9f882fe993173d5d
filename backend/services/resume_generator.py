"""Content generator: turns source resume text into structured ResumeData."""

import logging

from pydantic import ValidationError

from models.schemas.resume_data import ResumeData
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

# Shown to the user when generation fails
GENERATION_FAILED_MESSAGE = (
    "فشل الذكاء الاصطناعي في الوصول لمستوى الجودة المطلوب حالياً. يرجى المحاولة مرة أخرى."
)


async def enhance(resume_text: str) -> ResumeData | None:
    """Rewrite a resume with Gemini. Returns None if the service is unavailable
    or its output does not fit the ResumeData shape."""
    prompt = prompt_builder.build_enhance_prompt(resume_text)
    payload = await gemini_client.generate_json(prompt)
    if payload is None:
        logger.warning("Gemini enhancement unavailable")
        return None

    try:
        resume = ResumeData.model_validate(payload)
    except ValidationError as e:
        logger.error("Gemini output does not match resume schema: %s", e)
        return None

    logger.info(
        "Generated resume: %d experience entries, %d skills, %d education entries",
        len(resume.enhanced_experience or []),
        len(resume.enhanced_skills or []),
        len(resume.enhanced_education or []),
    )
    return resume
