from intake.review.composer import compose_review

__all__ = ["compose_review"]
