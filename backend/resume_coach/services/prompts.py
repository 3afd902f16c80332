"""
Prompt templates for resume analysis, resume building and career-coach chat.
Each template asks Gemini for a single JSON object matching the record
schema that the normalizer backfills.
"""
import json
from typing import Optional

MODE_ANALYZE = "analyze"
MODE_BUILD = "build"


# ============================================================================
# Analysis Prompt
# ============================================================================

ANALYZE_PROMPT = '''
You are an expert career consultant. Analyze the following resume text and return a JSON object with these exact keys:

{{
  "overallScore": number (0-100, ATS score based on resume quality),
  "skills": [ {{ "name": string, "level": "Beginner|Intermediate|Advanced|Expert", "category": "Technical|Soft|Language|Certification" }} ],
  "experienceLevel": "Entry|Mid|Senior|Executive",
  "strengths": [string],
  "weaknesses": [string],
  "suggestions": [
    {{
      "category": string,
      "priority": "High|Medium|Low",
      "suggestion": string,
      "impact": string
    }}
  ],
  "job_roles": [
    {{
      "title": string,
      "reasoning": string
    }}
  ],
  "keywordDensity": {{ [keyword: string]: number }},
  "atsCompatibility": number (0-100)
}}

If you do not have data for a field, return a reasonable default (empty array, 0, or empty string).
Return ONLY the JSON object, no markdown or explanation.

Resume:
"""
{resume_text}
"""
'''


# ============================================================================
# Resume Builder Prompt
# ============================================================================

BUILD_PROMPT = '''
You are an expert resume writer and career coach. Using the following user-provided details, generate a complete, ATS-optimized resume in professional format.

Return a JSON object with these keys:
{{
  "name": string,
  "title": string,
  "contact": string,
  "summary": string,
  "skills": [
    {{ "name": string, "category": string }}
  ],
  "experience": [
    {{ "title": string, "company": string, "location": string, "date": string, "details": [string] }}
  ],
  "education": [
    {{ "degree": string, "school": string, "date": string }}
  ],
  "projects": [
    {{ "name": string, "description": string }}
  ],
  "certifications": [string],
  "suggestions": [string],
  "atsScore": number (0-100, estimate of ATS compatibility)
}}

For the "skills" field, return an array of objects with:
  {{ "name": string, "category": string }}
If the user is a Software Engineer, use categories like "Frontend", "Backend", "Cloud/DevOps", "Tools", "Testing", etc. If another profession, use categories relevant to that field.

- Fill in any missing sections with reasonable, generic content and highlight them for the user to edit (e.g., [ADD YOUR EXPERIENCE HERE]).
- Suggest improvements for any weak or missing areas, especially those that would improve ATS score.

User Details:
"""
{resume_text}
"""
Return ONLY the JSON object, no markdown or explanation.
'''


# ============================================================================
# Career Coach Chat Prompt
# ============================================================================

CHAT_PROMPT = '''
{context}
You are an AI Career Coach. Respond conversationally and helpfully to the user's message below.

User: "{message}"
'''


def build_prompt(mode: str, resume_text: str) -> str:
    """
    Build the Gemini prompt for a resume request.

    Args:
        mode: "build" for the resume builder, anything else for analysis
        resume_text: Resume or free-form user details, embedded verbatim

    Returns:
        Prompt string
    """
    # Text goes in as-is; a literal """ inside it is not escaped
    template = BUILD_PROMPT if mode == MODE_BUILD else ANALYZE_PROMPT
    return template.format(resume_text=resume_text)


def build_chat_prompt(message: str, analysis: Optional[dict] = None) -> str:
    """Build the career-coach prompt, with the stored analysis as context when present."""
    context = ""
    if analysis:
        compact = json.dumps(analysis, separators=(",", ":"), ensure_ascii=False)
        context = f"Here is the user's resume analysis: {compact}\n"
    return CHAT_PROMPT.format(context=context, message=message)
