"""Factor evaluators for application/offer eligibility."""

from .availability_evaluator import AvailabilityEvaluator
from .borrower_evaluator import BorrowerEvaluator
from .loan_evaluator import LoanEvaluator

__all__ = [
    "AvailabilityEvaluator",
    "BorrowerEvaluator",
    "LoanEvaluator",
]
