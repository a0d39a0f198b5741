"""Prompt templates for Gemini API calls."""


def build_analysis_prompt(resume_text: str) -> str:
    """Ask the model to report which resume attributes are present.

    The JSON keys requested here are exactly the fields of ``AnalysisInput``.
    """
    return f"""You are an expert ATS (Applicant Tracking System) and resume analyst.

Read the resume below and report what it contains. Do not score it.

RESUME:
---
{resume_text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "hasContactInfo": <true if phone, email or location are present>,
  "hasWorkExperience": <true if there is a work experience section>,
  "hasEducation": <true if there is an education section>,
  "hasSkills": <true if skills are listed>,
  "formatIssues": [<short descriptions of ATS formatting problems, e.g. tables, images, inconsistent dates>],
  "skills": [<technical and soft skills mentioned>],
  "industryTerms": [<industry-specific terms and jargon>],
  "actionVerbs": [<strong action verbs used in bullet points>],
  "strengths": [<short statements of what the resume does well>]
}}

Use empty arrays where nothing applies. Copy skills, terms and verbs as written in the resume."""
