"""Impact checks: contact details, action verbs and quantified results."""

from models.responses import ATSCheck
from models.schemas.fix_candidate import FixCandidate
from services.ats.checks.base import BaseCheck, CheckContext
from services.ats.text import opening_word
from services.ats.vocabulary import ACTION_VERBS


def is_strong_opener(bullet: str) -> bool:
    word = opening_word(bullet)
    return bool(word) and word in ACTION_VERBS


class ContactInfoCheck(BaseCheck):
    check_id = "contact-info"
    name = "Contact Information"
    category = "impact"
    max_score = 10

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        basics = ctx.resume.basics
        has_email = bool(basics.email)
        has_phone = bool(basics.phone)
        has_location = bool(basics.location.city or basics.location.country)
        complete = has_email and has_phone and has_location

        details = []
        if not has_email:
            details.append("Missing email")
        if not has_phone:
            details.append("Missing phone")
        if not has_location:
            details.append("Missing location")

        return self.result(
            passed=complete,
            score=(4 if has_email else 0) + (3 if has_phone else 0) + (3 if has_location else 0),
            message=(
                "Contact info is complete."
                if complete
                else "Missing essential contact information."
            ),
            details=details,
        )


class ActionVerbsCheck(BaseCheck):
    check_id = "action-verbs"
    name = "Action Verbs"
    category = "impact"
    max_score = 25
    fix = FixCandidate(
        id="fix-action-verbs",
        check_id="action-verbs",
        title="Strengthen bullet openers",
        severity="medium",
        reason="Many bullets do not start with strong action verbs.",
        action="Rewrite bullets to start with verbs like Led, Built, Improved.",
        rationale_hint="Improves scannability and impact perception.",
    )

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        strong = 0
        weak_openers: list[str] = []
        for bullet in ctx.bullets:
            if is_strong_opener(bullet):
                strong += 1
            elif len(weak_openers) < 3:
                weak_openers.append(f"{bullet[:30]}...")

        ratio = strong / ctx.total_bullets if ctx.total_bullets else 0.0
        passed = ratio > 0.6
        if passed:
            score = 25
        elif ratio > 0.3:
            score = 15
        else:
            score = 5

        details = None
        if not passed and weak_openers:
            details = ['Weak openers found: "' + '", "'.join(weak_openers) + '"']

        return self.result(
            passed=passed,
            score=score,
            message=(
                "Strong use of action verbs."
                if passed
                else "Start more bullet points with strong action verbs (e.g., Led, Developed, Created)."
            ),
            details=details,
        )

    def feedback(self, check: ATSCheck) -> str:
        if not check.passed:
            return "Start bullets with strong action verbs (Achieved, Created, Led)."
        return check.message


class QuantifiableResultsCheck(BaseCheck):
    check_id = "quantifiable-results"
    name = "Quantifiable Results"
    category = "impact"
    max_score = 20
    fix = FixCandidate(
        id="fix-metrics",
        check_id="quantifiable-results",
        title="Add quantifiable impact",
        severity="high",
        reason="Few or no metrics detected in work achievements.",
        action="Add numbers (%, $, time, volume) to at least 3 bullets.",
        rationale_hint="High impact on ATS scoring for impact evidence.",
    )

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        count = ctx.metrics_count
        passed = count >= 3
        return self.result(
            passed=passed,
            score=20 if passed else (10 if count > 0 else 0),
            message=(
                "Great use of specific metrics and numbers."
                if passed
                else 'Add more numbers to quantify your impact (e.g., "Increased revenue by 20%").'
            ),
        )


class MetricDensityCheck(BaseCheck):
    check_id = "metric-density"
    name = "Metric Density"
    category = "impact"
    max_score = 10
    fix = FixCandidate(
        id="fix-metric-density",
        check_id="metric-density",
        title="Increase metric density",
        severity="medium",
        reason="Metrics appear in too few bullets.",
        action="Add numbers to at least 35% of bullets.",
        rationale_hint="Balanced metrics improve perceived impact.",
    )

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        total = ctx.total_bullets
        ratio = ctx.metrics_count / total if total else 0.0
        passed = ratio >= 0.35
        if passed:
            score = 10
        elif ratio >= 0.2:
            score = 6
        else:
            score = 2
        return self.result(
            passed=passed,
            score=score,
            message=(
                "Metrics are well distributed across bullets."
                if passed
                else "Add metrics to more bullet points for stronger impact."
            ),
            details=[f"Metrics per bullet: {ratio:.2f}"] if total else None,
        )
