from services.ats.scorer import calculate_ats_score

__all__ = ["calculate_ats_score"]
