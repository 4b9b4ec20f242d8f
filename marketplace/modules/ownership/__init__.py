"""Ownership ledger exports"""

from .models import OwnedBenefit, OwnedBenefitInput
from .service import OwnershipService

__all__ = [
    "OwnedBenefit",
    "OwnedBenefitInput",
    "OwnershipService",
]
