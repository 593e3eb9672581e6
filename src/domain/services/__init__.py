"""Domain services."""

from src.domain.services.consensus_scorer import SEVERITY_WEIGHTS, ConsensusScorer
from src.domain.services.finding_clusterer import FindingClusterer
from src.domain.services.finding_similarity import FindingSimilarity
from src.domain.services.lexical_similarity import LexicalTextSimilarity
from src.domain.services.risk_combiner import combine_risk_assessments

__all__ = [
    "SEVERITY_WEIGHTS",
    "ConsensusScorer",
    "FindingClusterer",
    "FindingSimilarity",
    "LexicalTextSimilarity",
    "combine_risk_assessments",
]
