"""Prompt templates for Gemini API calls."""

from models.resume import ResumeDocument


def _joined(parts, sep: str) -> str:
    return sep.join(p for p in parts if p)


def build_resume_text(resume: ResumeDocument) -> str:
    """Condense a structured resume into the plain-text context sent to the LLM."""
    parts: list[str] = []
    basics = resume.basics
    if basics.name:
        parts.append(f"Name: {basics.name}")
    if basics.label:
        parts.append(f"Title: {basics.label}")
    if basics.summary:
        parts.append(f"Summary: {basics.summary}")

    skills = [s for s in (_joined([sk.name, *sk.keywords], ", ") for sk in resume.skills) if s]
    if skills:
        parts.append(f"Skills: {' | '.join(skills)}")

    work = [
        line for line in (
            _joined([w.position, w.company, w.summary, *w.highlights], " | ")
            for w in resume.work
        ) if line
    ]
    if work:
        parts.append("Experience:\n" + "\n".join(work))

    projects = [
        line for line in (
            _joined([p.name, p.description, *p.keywords, *p.highlights], " | ")
            for p in resume.projects
        ) if line
    ]
    if projects:
        parts.append("Projects:\n" + "\n".join(projects))

    education = [
        line for line in (
            _joined([e.study_type, e.area, e.institution], " | ") for e in resume.education
        ) if line
    ]
    if education:
        parts.append(f"Education: {' | '.join(education)}")

    certificates = [
        line for line in (_joined([c.name, c.issuer], " from ") for c in resume.certificates)
        if line
    ]
    if certificates:
        parts.append(f"Certificates: {', '.join(certificates)}")

    return "\n".join(parts)


def build_ats_analysis_prompt(resume_text: str, job_description: str | None = None) -> str:
    """ATS compatibility review. The model must answer with a single JSON object."""
    jd_section = ""
    if job_description:
        jd_section = f"""
Target Job Description:
{job_description.strip()}
"""

    return f"""You are an expert ATS (Applicant Tracking System) analyst.
Analyze the resume for ATS compatibility and provide actionable feedback.

Return a JSON object with these keys:
  score: number (0-100) - overall ATS compatibility score
  strengths: string[] - 3-5 things done well for ATS
  criticalIssues: string[] - 2-5 issues that could cause ATS rejection
  improvements: string[] - 5-8 specific improvements ranked by impact
  keywordSuggestions: string[] - 5-10 industry keywords to add
  formatIssues: string[] - any formatting concerns for ATS parsing
  summaryFeedback: string - specific feedback on the professional summary
  bulletFeedback: {{ original: string, improved: string, reason: string }}[] - up to 3 bullet rewrites

Return only valid JSON without markdown code blocks.
{jd_section}
Resume:
{resume_text.strip()}"""
