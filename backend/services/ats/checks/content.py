"""Content checks: summary, buzzwords, skills, JD match, dates, repetition, tense."""

from collections import Counter

from models.responses import ATSCheck
from models.schemas.fix_candidate import FixCandidate
from services.ats.checks.base import BaseCheck, CheckContext
from services.ats.text import normalize, round_half_up
from services.ats.vocabulary import CLICHES, DATE_RE, PAST_TENSE_RE, PRESENT_TENSE_RE


class SummaryQualityCheck(BaseCheck):
    check_id = "summary-quality"
    name = "Professional Summary"
    category = "content"
    max_score = 10

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        length = len(ctx.resume.basics.summary)
        good = 150 < length < 600
        has_summary = length > 0
        if good:
            message = "Summary length is optimal."
        elif has_summary:
            message = "Summary should be 3-5 sentences long."
        else:
            message = "Missing professional summary."
        return self.result(
            passed=good,
            score=10 if good else (5 if has_summary else 0),
            message=message,
        )


def find_cliches(normalized_text: str, limit: int | None = None) -> list[str]:
    """Clichés present in the text (plain containment), in vocabulary order."""
    found = [c for c in CLICHES if c in normalized_text]
    return found if limit is None else found[:limit]


class ClichesCheck(BaseCheck):
    check_id = "cliches"
    name = "Cliches & Buzzwords"
    category = "content"
    max_score = 15

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        found = find_cliches(ctx.extracted.full_normalized)
        shown = found[:5]
        passed = not found
        return self.result(
            passed=passed,
            score=15 if passed else max(0, 15 - len(found) * 3),
            message=(
                "No overused buzzwords found."
                if passed
                else f"Avoid using vague buzzwords. Found: {', '.join(shown)}."
            ),
            details=shown or None,
        )

    def feedback(self, check: ATSCheck) -> str:
        if not check.passed and check.details:
            return f'Remove cliches like "{check.details[0]}" to be more specific.'
        return check.message


class SkillsSectionCheck(BaseCheck):
    check_id = "skills-section"
    name = "Skills Section"
    category = "content"
    max_score = 10
    fix = FixCandidate(
        id="fix-skills",
        check_id="skills-section",
        title="Expand skills section",
        severity="medium",
        reason="Skills section is thin or missing.",
        action="Add at least 5 relevant skills and tools from the JD.",
        rationale_hint="ATS matching relies heavily on skills coverage.",
    )

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        skills = ctx.resume.skills
        count = len(skills) + sum(len(s.keywords) for s in skills)
        passed = count >= 5
        return self.result(
            passed=passed,
            score=10 if passed else 0,
            message=(
                "Skills section is well-populated."
                if passed
                else "List at least 5 relevant skills."
            ),
        )


class KeywordMatchCheck(BaseCheck):
    check_id = "keyword-match"
    name = "Job Description Match"
    category = "content"
    max_score = 20
    fix = FixCandidate(
        id="fix-keyword-match",
        check_id="keyword-match",
        title="Improve job description alignment",
        severity="high",
        reason="Low overlap with job description keywords.",
        action="Add missing keywords to Skills, Summary, and Work bullets.",
        rationale_hint="Keyword match strongly affects ATS ranking.",
    )

    def evaluate(self, ctx: CheckContext) -> ATSCheck | None:
        analysis = ctx.keyword_analysis
        if analysis is None:
            return None

        summary = analysis.summary
        passed = summary.match_score >= 60
        missing_skills = summary.prioritized_missing.skills
        missing_duties = summary.prioritized_missing.responsibilities[:3]
        details = [
            f"Matched: {analysis.matched_count}/{len(summary.top_keywords)} key terms.",
            f"Missing skills: {', '.join(missing_skills)}"
            if missing_skills else "No major skill gaps.",
            f"Missing responsibilities: {', '.join(missing_duties)}"
            if missing_duties else "Responsibilities alignment looks good.",
        ]
        return self.result(
            passed=passed,
            score=round_half_up(summary.match_score / 100 * 20),
            message=(
                "Good keyword overlap with the job description."
                if passed
                else "Increase overlap with the job description keywords."
            ),
            details=details,
        )


class DateConsistencyCheck(BaseCheck):
    check_id = "date-consistency"
    name = "Date Consistency"
    category = "content"
    max_score = 10
    fix = FixCandidate(
        id="fix-dates",
        check_id="date-consistency",
        title="Standardize date formats",
        severity="medium",
        reason="Dates are inconsistent or non-parsable.",
        action="Use YYYY or YYYY-MM consistently across sections.",
        rationale_hint="Improves ATS parsing accuracy for timelines.",
    )

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        issues: list[str] = []
        entries = [(job.company, job.start_date, job.end_date) for job in ctx.resume.work]
        entries += [(edu.institution, edu.start_date, edu.end_date) for edu in ctx.resume.education]
        for label, start, end in entries:
            if start and not DATE_RE.fullmatch(start):
                issues.append(f"{label}: start date format")
            if end and not DATE_RE.fullmatch(end):
                issues.append(f"{label}: end date format")

        passed = not issues
        return self.result(
            passed=passed,
            score=10 if passed else 4,
            message=(
                "Dates are consistent and parsable."
                if passed
                else "Use consistent date formats (YYYY or YYYY-MM)."
            ),
            details=issues[:4],
        )


class RedundancyCheck(BaseCheck):
    check_id = "redundancy"
    name = "Repetition"
    category = "content"
    max_score = 10
    fix = FixCandidate(
        id="fix-redundancy",
        check_id="redundancy",
        title="Reduce repetition",
        severity="low",
        reason="Several bullets repeat phrasing or structure.",
        action="Vary verbs and focus each bullet on a unique outcome.",
        rationale_hint="Reduces redundancy and improves recruiter engagement.",
    )

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        bullets = ctx.normalized_bullets
        unique = len(ctx.bullet_counts)
        ratio = 1 - unique / max(1, len(bullets)) if bullets else 0.0
        passed = ratio < 0.2
        return self.result(
            passed=passed,
            score=10 if passed else 5,
            message=(
                "Bullets are varied and non-repetitive."
                if passed
                else "Reduce repetitive bullet phrasing."
            ),
            details=[f"Approx redundancy: {round_half_up(ratio * 100)}%"] if bullets else None,
        )


def job_tense(text: str) -> str:
    """Label normalized job text as 'past', 'present' or 'mixed'."""
    has_past = PAST_TENSE_RE.search(text) is not None
    has_present = PRESENT_TENSE_RE.search(text) is not None
    if has_past and not has_present:
        return "past"
    if has_present and not has_past:
        return "present"
    return "mixed"


class TenseConsistencyCheck(BaseCheck):
    check_id = "tense-consistency"
    name = "Tense Consistency"
    category = "content"
    max_score = 10
    fix = FixCandidate(
        id="fix-tense",
        check_id="tense-consistency",
        title="Fix tense consistency",
        severity="low",
        reason="Mixed verb tenses in work experience.",
        action="Use past tense for past roles and present tense for current roles.",
        rationale_hint="Consistency improves readability and professionalism.",
    )

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        labels = [
            job_tense(normalize(f"{job.summary} {' '.join(job.highlights)}"))
            for job in ctx.resume.work
        ]
        counts = Counter(labels)
        # stable sort keeps the first-seen tense on ties
        ranked = sorted((t for t in labels if t != "mixed"), key=lambda t: -counts[t])
        dominant = ranked[0] if ranked else None
        passed = dominant is None or all(t in (dominant, "mixed") for t in labels)
        return self.result(
            passed=passed,
            score=10 if passed else 5,
            message=(
                "Verb tense is consistent."
                if passed
                else "Use past tense for past roles and present tense for current roles."
            ),
        )
