"""Prompt templates for Gemini API calls."""


def build_enhance_prompt(resume_text: str) -> str:
    """Rewrite a resume into the structured shape the ATS checker consumes."""
    return f"""You are an executive career coach who rewrites resumes for senior
professionals in the Middle East.

Rewrite the resume below into a strong, confident Arabic version:
- Lead with impact; phrase achievements with numbers, percentages and budgets.
- Include the keywords most requested for the target job title.
- Write a dense professional summary of 3-4 lines.
- Remove filler and cliches. Use short bullet points starting with action verbs.

RESUME:
---
{resume_text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "fullName": "<string>",
  "jobTitle": "<string>",
  "email": "<string>",
  "phone": "<string>",
  "location": "<string>",
  "summary": "<string>",
  "enhancedExperience": [
    {{
      "title": "<string>",
      "company": "<string>",
      "duration": "<string>",
      "description": "<achievement-based description with numbers>",
      "bullets": ["<string>"]
    }}
  ],
  "enhancedSkills": ["<string>"],
  "enhancedEducation": [
    {{"degree": "<string>", "school": "<string>", "year": "<string>"}}
  ]
}}"""
