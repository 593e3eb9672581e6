from src.application.services.cross_checker import CrossChecker
from src.application.services.finding_verifier import FindingVerifier
from src.application.services.prioritizer import Prioritizer

__all__ = [
    "CrossChecker",
    "FindingVerifier",
    "Prioritizer",
]
