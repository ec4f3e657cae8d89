"""Rank remedies for failed checks by how many points they could recover."""

from models.responses import ATSCheck, FeedbackItem
from models.schemas.fix_candidate import FixCandidate

SEVERITY_RANK = {"high": 3, "medium": 2, "low": 1}
MAX_FIXES = 5


def prioritize_fixes(
    candidates: list[FixCandidate],
    checks: list[ATSCheck],
    limit: int = MAX_FIXES,
) -> list[FeedbackItem]:
    by_id = {check.id: check for check in checks}
    items: list[FeedbackItem] = []
    for candidate in candidates:
        check = by_id.get(candidate.check_id)
        if check is not None:
            impact = max(0, check.max_score - check.score)
            rationale = (
                f"{candidate.rationale_hint} "
                f"({check.score}/{check.max_score} on {check.name})."
            )
        else:
            impact = 0
            rationale = candidate.rationale_hint
        items.append(FeedbackItem(
            id=candidate.id,
            title=candidate.title,
            severity=candidate.severity,
            reason=candidate.reason,
            action=candidate.action,
            rationale=rationale,
            impact_score=impact,
        ))

    # sorted() is stable: equal impact and severity keep catalog order
    items.sort(key=lambda item: (-item.impact_score, -SEVERITY_RANK[item.severity]))
    return items[:limit]
