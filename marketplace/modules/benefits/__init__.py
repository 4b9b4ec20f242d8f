"""Benefit catalog exports"""

from .filters import BenefitFilter
from .models import Benefit, BenefitCategory, BenefitInput
from .service import BenefitService

__all__ = [
    "Benefit",
    "BenefitCategory",
    "BenefitFilter",
    "BenefitInput",
    "BenefitService",
]
