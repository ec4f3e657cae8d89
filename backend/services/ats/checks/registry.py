"""Ordered check catalog.

Checks run in catalog order and each one is independent of the others, so a
single check can be looked up by id and evaluated on its own in tests.
"""

import logging

from models.responses import ATSCheck
from services.ats.checks.base import BaseCheck, CheckContext
from services.ats.checks.content import (
    ClichesCheck,
    DateConsistencyCheck,
    KeywordMatchCheck,
    RedundancyCheck,
    SkillsSectionCheck,
    SummaryQualityCheck,
    TenseConsistencyCheck,
)
from services.ats.checks.formatting import (
    ConsistencyCheck,
    LayoutRiskCheck,
    StandardSectionsCheck,
)
from services.ats.checks.impact import (
    ActionVerbsCheck,
    ContactInfoCheck,
    MetricDensityCheck,
    QuantifiableResultsCheck,
)
from services.ats.checks.readability import (
    ActiveVoiceCheck,
    BulletDensityCheck,
    ConciseLanguageCheck,
    SentenceClarityCheck,
)

logger = logging.getLogger(__name__)

CHECK_CATALOG: tuple[BaseCheck, ...] = (
    ContactInfoCheck(),
    SummaryQualityCheck(),
    ActionVerbsCheck(),
    QuantifiableResultsCheck(),
    ClichesCheck(),
    ConsistencyCheck(),
    SkillsSectionCheck(),
    KeywordMatchCheck(),
    StandardSectionsCheck(),
    LayoutRiskCheck(),
    DateConsistencyCheck(),
    MetricDensityCheck(),
    RedundancyCheck(),
    TenseConsistencyCheck(),
    SentenceClarityCheck(),
    ActiveVoiceCheck(),
    ConciseLanguageCheck(),
    BulletDensityCheck(),
)

_BY_ID: dict[str, BaseCheck] = {check.check_id: check for check in CHECK_CATALOG}


def get_check(check_id: str) -> BaseCheck:
    """Look up a catalog entry by id."""
    try:
        return _BY_ID[check_id]
    except KeyError:
        raise ValueError(f"Unknown check: {check_id}") from None


def run_checks(ctx: CheckContext) -> list[tuple[BaseCheck, ATSCheck]]:
    """Evaluate the catalog in order, skipping checks that do not apply."""
    results: list[tuple[BaseCheck, ATSCheck]] = []
    for check in CHECK_CATALOG:
        outcome = check.evaluate(ctx)
        if outcome is None:
            logger.debug("Check %s skipped", check.check_id)
            continue
        results.append((check, outcome))
    return results
