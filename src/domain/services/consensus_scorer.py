from __future__ import annotations

from typing import TYPE_CHECKING

from src.domain.value_objects.consensus_config import DEFAULT_CONSENSUS_CONFIG, ConsensusConfig
from src.domain.value_objects.review_enums import Severity

if TYPE_CHECKING:
    from src.domain.entities.council_review import FindingCluster

SEVERITY_WEIGHTS: dict[Severity, float] = {
    Severity.CRITICAL: 1.2,
    Severity.HIGH: 1.1,
    Severity.MEDIUM: 1.0,
    Severity.LOW: 0.9,
    Severity.INFO: 0.8,
}


class ConsensusScorer:
    def __init__(self, config: ConsensusConfig = DEFAULT_CONSENSUS_CONFIG):
        self.config = config

    def score(self, cluster: FindingCluster, total_models: int) -> float:
        """Agreement strength of a cluster in [0, 1]."""
        score = cluster.finding.confidence

        agreeing = len(cluster.sources)
        if agreeing > 1 and total_models > 0:
            ratio = min(1.0, agreeing / total_models)
            score *= 1 + (self.config.agreement_boost - 1) * ratio

        score *= SEVERITY_WEIGHTS[cluster.finding.severity]
        return min(1.0, max(0.0, score))

    def passes_filter(self, cluster: FindingCluster, score: float) -> bool:
        if score < self.config.min_consensus_threshold:
            return False

        if len(cluster.sources) == 1:
            if not self.config.include_single_source_findings:
                return False
            if cluster.finding.confidence < self.config.single_source_min_confidence:
                return False

        return True
