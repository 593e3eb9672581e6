from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from src.domain.entities.council_review import FindingCluster
from src.domain.services.finding_similarity import FindingSimilarity

if TYPE_CHECKING:
    from collections.abc import Mapping

    from src.domain.entities.finding import Finding
    from src.domain.entities.review_output import ReviewOutput
    from src.domain.value_objects.review_enums import FindingCategory

DEFAULT_SIMILARITY_THRESHOLD = 0.6


class FindingClusterer:
    """Greedy single-pass clustering of findings across reviewers.

    Candidates are compared against the cluster seed only, not against
    members absorbed earlier, so chains of pairwise-similar findings may end
    up in separate clusters. Swap `similarity` to change the comparison.
    """

    def __init__(
        self,
        similarity: FindingSimilarity | None = None,
        threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    ):
        self.similarity = similarity or FindingSimilarity()
        self.threshold = threshold

    def cluster(
        self, reviews: Mapping[str, ReviewOutput]
    ) -> dict[FindingCategory, list[FindingCluster]]:
        by_category: dict[FindingCategory, list[tuple[str, Finding]]] = {}
        for reviewer, review in reviews.items():
            for finding in review.findings:
                by_category.setdefault(finding.category, []).append((reviewer, finding))

        groups: dict[FindingCategory, list[FindingCluster]] = {}
        for category, items in by_category.items():
            groups[category] = self._cluster_items(items)
            logger.debug(
                "Clustered {} {} findings into {} clusters",
                len(items),
                category.value,
                len(groups[category]),
            )
        return groups

    def _cluster_items(self, items: list[tuple[str, Finding]]) -> list[FindingCluster]:
        clusters: list[FindingCluster] = []
        used: set[int] = set()

        for i, (seed_source, seed) in enumerate(items):
            if i in used:
                continue
            used.add(i)
            cluster = FindingCluster(finding=seed, sources=[seed_source])

            for j in range(i + 1, len(items)):
                if j in used:
                    continue
                source, candidate = items[j]
                # A reviewer counts once per cluster.
                if source in cluster.sources:
                    continue
                if self.similarity.score(seed, candidate) < self.threshold:
                    continue
                used.add(j)
                cluster.sources.append(source)
                if candidate.confidence > cluster.finding.confidence:
                    cluster.finding = candidate

            clusters.append(cluster)

        return clusters
