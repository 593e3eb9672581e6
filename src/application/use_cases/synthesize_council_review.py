from collections.abc import Mapping

from loguru import logger

from src.domain.entities.council_review import (
    ConsensusFinding,
    CouncilReviewOutput,
    FindingCluster,
    ModelConflict,
)
from src.domain.entities.review_output import ReviewOutput
from src.domain.ports.text_similarity_port import TextSimilarity
from src.domain.services.consensus_scorer import ConsensusScorer
from src.domain.services.finding_clusterer import FindingClusterer
from src.domain.services.finding_similarity import FindingSimilarity
from src.domain.services.lexical_similarity import LexicalTextSimilarity
from src.domain.services.risk_combiner import combine_risk_assessments
from src.domain.value_objects.consensus_config import DEFAULT_CONSENSUS_CONFIG, ConsensusConfig

SUPPORTS_CLAIM = "Supports this claim"
DISPUTES_CLAIM = "Disputes this claim"
UNIQUE_INSIGHT_MIN_CONFIDENCE = 0.6


class NoReviewerOutputError(ValueError):
    """Raised when synthesis is requested without any successful reviewer."""


class SynthesizeCouncilReview:
    """Use case for combining several reviewers' outputs into one council report."""

    def __init__(
        self,
        config: ConsensusConfig = DEFAULT_CONSENSUS_CONFIG,
        clusterer: FindingClusterer | None = None,
        scorer: ConsensusScorer | None = None,
        text_similarity: TextSimilarity | None = None,
    ):
        self.config = config
        self.text_similarity = text_similarity or LexicalTextSimilarity()
        self.clusterer = clusterer or FindingClusterer(
            FindingSimilarity(self.text_similarity), threshold=config.similarity_threshold
        )
        self.scorer = scorer or ConsensusScorer(config)

    def run(
        self,
        reviews: Mapping[str, ReviewOutput],
        failed: list[str] | None = None,
    ) -> CouncilReviewOutput:
        """Synthesize a council review.

        `reviews` maps reviewer id to its output and must not be empty.
        Reviewers listed in `failed` are reported but otherwise ignored.
        """
        if not reviews:
            raise NoReviewerOutputError("At least one successful reviewer output is required")

        reviews = dict(reviews)
        clusters = [c for group in self.clusterer.cluster(reviews).values() for c in group]

        consensus_findings = self.build_consensus_findings(clusters, len(reviews))
        unanimous = self.find_unanimous_agreements(reviews)
        conflicts = self.detect_conflicts(reviews)
        unique_insights = self.find_unique_insights(clusters)
        combined_risk = combine_risk_assessments(r.risk_assessment for r in reviews.values())

        insight_count = sum(len(v) for v in unique_insights.values())
        notes = (
            f"Synthesized {len(reviews)} model reviews. "
            f"Found {len(consensus_findings)} consensus findings, "
            f"{len(conflicts)} conflicts, "
            f"{insight_count} unique insights."
        )
        logger.info(notes)
        if failed:
            logger.warning("Reviewers failed and were excluded: {}", ", ".join(failed))

        return CouncilReviewOutput(
            individual_reviews=reviews,
            consensus_findings=consensus_findings,
            unanimous_agreements=unanimous,
            conflicts=conflicts,
            unique_insights=unique_insights,
            combined_risk=combined_risk,
            models_participated=list(reviews),
            models_failed=list(failed) if failed else None,
            synthesis_notes=notes,
        )

    def build_consensus_findings(
        self, clusters: list[FindingCluster], total_models: int
    ) -> list[ConsensusFinding]:
        findings: list[ConsensusFinding] = []
        for cluster in clusters:
            score = self.scorer.score(cluster, total_models)
            if not self.scorer.passes_filter(cluster, score):
                logger.debug(
                    "Dropped cluster '{}' (score {:.2f}, {} sources)",
                    cluster.finding.title,
                    score,
                    len(cluster.sources),
                )
                continue
            findings.append(ConsensusFinding.from_cluster(cluster, score))

        findings.sort(key=lambda f: f.consensus_score, reverse=True)
        return findings

    def find_unanimous_agreements(self, reviews: Mapping[str, ReviewOutput]) -> list[str]:
        """Claims every reviewer agreed with. Needs at least two reviewers."""
        if len(reviews) < 2:
            return []

        counts: dict[str, int] = {}
        for review in reviews.values():
            claims = {self.text_similarity.normalize(a.original_claim) for a in review.agreements}
            for claim in claims:
                counts[claim] = counts.get(claim, 0) + 1

        return [claim for claim, count in counts.items() if count == len(reviews)]

    def detect_conflicts(self, reviews: Mapping[str, ReviewOutput]) -> list[ModelConflict]:
        """Claims that one reviewer supports and another disputes."""
        positions: dict[str, dict[str, bool]] = {}
        for reviewer, review in reviews.items():
            for agreement in review.agreements:
                key = self.text_similarity.normalize(agreement.original_claim)
                positions.setdefault(key, {})[reviewer] = True
            for disagreement in review.disagreements:
                key = self.text_similarity.normalize(disagreement.original_claim)
                positions.setdefault(key, {})[reviewer] = False

        conflicts: list[ModelConflict] = []
        for claim, stances in positions.items():
            if len(stances) < 2:
                continue
            if any(stances.values()) and not all(stances.values()):
                conflicts.append(
                    ModelConflict(
                        topic=claim,
                        positions={
                            reviewer: SUPPORTS_CLAIM if agrees else DISPUTES_CLAIM
                            for reviewer, agrees in stances.items()
                        },
                    )
                )
        return conflicts

    def find_unique_insights(self, clusters: list[FindingCluster]) -> dict[str, list[str]]:
        unique: dict[str, list[str]] = {}
        for cluster in clusters:
            if len(cluster.sources) != 1:
                continue
            if cluster.finding.confidence < UNIQUE_INSIGHT_MIN_CONFIDENCE:
                continue
            unique.setdefault(cluster.sources[0], []).append(
                f"[{cluster.finding.severity.value}] {cluster.finding.title}"
            )
        return unique
