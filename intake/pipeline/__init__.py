from intake.pipeline.orchestrator import apply_change, request_review

__all__ = ["apply_change", "request_review"]
