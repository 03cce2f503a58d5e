"""Prompt templates for Gemini API calls."""


def build_match_prompt(candidate_text: str, job_text: str) -> str:
    """Candidate/job match scoring for the semantic ranking stage."""
    return f"""You are an expert recruiter analyzing how well a candidate fits a job posting.

SCORING RUBRIC (follow strictly):
- 0-20:  No relevant match. The candidate works in a different field.
- 20-40: Weak match. Some transferable skills but major gaps in core requirements.
- 40-60: Moderate match. Meets some key requirements but misses several important ones.
- 60-80: Strong match. Meets most requirements with minor gaps.
- 80-100: Exceptional match. Meets or exceeds nearly all requirements.

CANDIDATE:
---
{candidate_text}
---

JOB POSTING:
---
{job_text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "score": <integer 0-100>,
  "confidence_level": <number 0-1, how confident you are in this assessment>,
  "skill_matches": [<skills the candidate has that the job asks for>],
  "explanation": "<1-2 sentences on why this is or is not a good match>"
}}"""
