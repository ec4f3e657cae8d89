"""Formatting checks: bullet punctuation, standard sections and layout safety."""

from models.responses import ATSCheck
from models.resume import ResumeDocument
from models.schemas.fix_candidate import FixCandidate
from services.ats.checks.base import BaseCheck, CheckContext


def layout_risk_flags(resume: ResumeDocument) -> dict[str, bool]:
    """Layout features that are known to confuse ATS parsers."""
    layout = resume.meta.layout_settings
    return {
        "columns": layout.column_count > 1,
        "sidebar_header": bool(layout.header_position) and layout.header_position != "top",
        "icons": bool(layout.section_heading_icons) and layout.section_heading_icons != "none",
        "photo": bool(resume.basics.image),
    }


_LAYOUT_DETAILS = {
    "columns": "Multi-column layout detected.",
    "sidebar_header": "Sidebar header layout detected.",
    "icons": "Section heading icons enabled.",
    "photo": "Profile photo detected.",
}


class ConsistencyCheck(BaseCheck):
    check_id = "consistency"
    name = "Formatting Consistency"
    category = "formatting"
    max_score = 10

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        with_period = sum(1 for b in ctx.bullets if b.strip().endswith("."))
        without_period = ctx.total_bullets - with_period
        # all or nothing; no bullets at all counts as inconsistent
        consistent = (with_period == 0 and without_period > 0) or (
            with_period > 0 and without_period == 0
        )
        return self.result(
            passed=consistent,
            score=10 if consistent else 5,
            message=(
                "Consistent punctuation formatting."
                if consistent
                else "Inconsistent usage of periods at the end of bullet points."
            ),
        )


class StandardSectionsCheck(BaseCheck):
    check_id = "parsing-standard-sections"
    name = "Standard Sections"
    category = "formatting"
    max_score = 5

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        resume = ctx.resume
        present = bool(resume.work and resume.education and resume.skills)
        return self.result(
            passed=present,
            score=5 if present else 0,
            message=(
                "Standard sections (Work, Education, Skills) are present."
                if present
                else "Ensure you have Work, Education, and Skills sections for better ATS parsing."
            ),
        )


class LayoutRiskCheck(BaseCheck):
    check_id = "layout-ats-risk"
    name = "ATS Parsing Safety"
    category = "formatting"
    max_score = 10
    fix = FixCandidate(
        id="fix-layout",
        check_id="layout-ats-risk",
        title="Use ATS-safe layout",
        severity="high",
        reason="Multi-column layout, icons, or photo can reduce ATS parsing.",
        action="Switch to a single-column template without icons/photos.",
        rationale_hint="Layout issues can hide content from ATS parsing.",
    )

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        flags = layout_risk_flags(ctx.resume)
        risks = [name for name, flagged in flags.items() if flagged]
        safe = not risks
        return self.result(
            passed=safe,
            score=10 if safe else max(3, 10 - len(risks) * 2),
            message=(
                "Layout is ATS-friendly."
                if safe
                else "Layout may reduce ATS parsing accuracy (columns, icons, or photos)."
            ),
            details=[_LAYOUT_DETAILS[name] for name in risks],
        )
