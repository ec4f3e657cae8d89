"""Plain-text rendering of a resume the way an ATS parser would read it,
plus the structural risks that could garble that reading."""

import re

from models.responses import ParsingRisk
from models.resume import ResumeDocument
from services.ats.checks.formatting import layout_risk_flags
from services.ats.vocabulary import STANDARD_HEADINGS

_HEADING_STRIP_RE = re.compile(r"[^a-z\s]")
_SPACES_RE = re.compile(r"\s+")

DEFAULT_HEADINGS = {
    "summary": "Summary",
    "work": "Work Experience",
    "education": "Education",
    "skills": "Skills",
    "projects": "Projects",
    "certificates": "Certificates",
}

_LAYOUT_RISKS = {
    "columns": ParsingRisk(
        id="risk-columns",
        severity="high",
        message="Multi-column layouts can break ATS parsing order.",
        suggestion="Use a single-column template for ATS submissions.",
    ),
    "sidebar_header": ParsingRisk(
        id="risk-sidebar-header",
        severity="medium",
        message="Sidebar headers may cause ATS to miss contact details.",
        suggestion="Move contact details to a top header.",
    ),
    "icons": ParsingRisk(
        id="risk-icons",
        severity="medium",
        message="Icons can interfere with ATS text extraction.",
        suggestion="Disable icons for ATS-focused resumes.",
    ),
    "photo": ParsingRisk(
        id="risk-photo",
        severity="medium",
        message="Profile photos can confuse ATS parsers.",
        suggestion="Remove photos for ATS submissions.",
    ),
}


def normalize_heading(value: str | None) -> str:
    text = _HEADING_STRIP_RE.sub("", (value or "").lower())
    return _SPACES_RE.sub(" ", text).strip()


def _date_text(*dates: str) -> str:
    joined = " - ".join(d for d in dates if d)
    return f"({joined})" if joined else ""


def build_parsing_preview(resume: ResumeDocument) -> str:
    titles = resume.meta.layout_settings.section_titles
    basics = resume.basics

    def heading(key: str) -> str:
        return (titles.get(key) or DEFAULT_HEADINGS[key]).upper()

    lines: list[str] = [basics.name or "Your Name"]
    if basics.label:
        lines.append(basics.label)
    contact = " | ".join(
        part for part in (basics.email, basics.phone, basics.location.city, basics.location.country)
        if part
    )
    if contact:
        lines.append(contact)
    lines.append("")

    if basics.summary:
        lines += [heading("summary"), basics.summary, ""]

    if resume.work:
        lines.append(heading("work"))
        for job in resume.work:
            lines.append(
                f"{job.position} | {job.company} {_date_text(job.start_date, job.end_date)}".strip()
            )
            if job.summary:
                lines.append(job.summary)
            lines += [f"- {b}" for b in job.highlights]
            lines.append("")

    if resume.education:
        lines.append(heading("education"))
        for edu in resume.education:
            lines.append(
                f"{edu.study_type} {edu.area} | {edu.institution} "
                f"{_date_text(edu.start_date, edu.end_date)}".strip()
            )
            if edu.summary:
                lines.append(edu.summary)
            lines.append("")

    if resume.skills:
        lines.append(heading("skills"))
        lines.append(" | ".join(
            ": ".join(part for part in (s.name, *s.keywords) if part) for s in resume.skills
        ))
        lines.append("")

    if resume.projects:
        lines.append(heading("projects"))
        for project in resume.projects:
            lines.append(
                f"{project.name} {_date_text(project.start_date, project.end_date)}".strip()
            )
            if project.description:
                lines.append(project.description)
            lines += [f"- {b}" for b in project.highlights]
            lines.append("")

    if resume.certificates:
        lines.append(heading("certificates"))
        for cert in resume.certificates:
            lines.append(f"{cert.name} | {cert.issuer} {_date_text(cert.date)}".strip())
        lines.append("")

    return "\n".join(lines).strip()


def detect_heading_risks(resume: ResumeDocument) -> list[ParsingRisk]:
    titles = resume.meta.layout_settings.section_titles
    risks: list[ParsingRisk] = []
    for key, allowed in STANDARD_HEADINGS.items():
        title = titles.get(key)
        if not title or normalize_heading(title) in allowed:
            continue
        risks.append(ParsingRisk(
            id=f"risk-heading-{key}",
            severity="medium",
            message=f'Non-standard heading "{title}" may reduce ATS recognition.',
            suggestion=f'Use a standard heading like "{allowed[0]}".',
        ))
    return risks


def detect_layout_risks(resume: ResumeDocument) -> list[ParsingRisk]:
    flags = layout_risk_flags(resume)
    return [_LAYOUT_RISKS[name].model_copy() for name, flagged in flags.items() if flagged]


def detect_parsing_risks(resume: ResumeDocument) -> list[ParsingRisk]:
    """Heading risks first, then layout risks."""
    return detect_heading_risks(resume) + detect_layout_risks(resume)
