from services.ats.checks.base import BaseCheck, CheckContext
from services.ats.checks.registry import CHECK_CATALOG, get_check, run_checks

__all__ = ["BaseCheck", "CheckContext", "CHECK_CATALOG", "get_check", "run_checks"]
