import os
import re

from src.domain.entities.prior_analysis import PriorAnalysis
from src.domain.entities.verified_finding import CrossCheckResult, VerifiedFinding
from src.domain.ports.text_similarity_port import TextSimilarity
from src.domain.services.lexical_similarity import LexicalTextSimilarity

TITLE_MATCH_CHARS = 30
ASSUMPTION_MATCH_CHARS = 20
CONFLICT_MARKER = "incorrect"

_LINE_SUFFIX = re.compile(r"(:\d+(-\d+)?)+$")


def same_file(file: str, prior_location: str) -> bool:
    """True if `prior_location` names `file`, ignoring `:line` suffixes."""
    prior_file = _LINE_SUFFIX.sub("", prior_location.strip())
    if not prior_file or not file:
        return False
    return os.path.normpath(prior_file) == os.path.normpath(file)


class CrossChecker:
    """Compares a verified finding with the prior analysis.

    Matching is lexical: see `TextSimilarity` for the replaceable part.
    """

    def __init__(self, text_similarity: TextSimilarity | None = None):
        self.text_similarity = text_similarity or LexicalTextSimilarity()

    def cross_check(
        self, verified: VerifiedFinding, prior: PriorAnalysis | None
    ) -> VerifiedFinding:
        if prior is None:
            return verified

        prior_mentioned = False
        already_addressed = False
        conflicts = False
        finding = verified.finding

        for prior_finding in prior.findings:
            desc_match = self.text_similarity.contains_fragment(
                prior_finding.description, finding.title, TITLE_MATCH_CHARS
            )
            loc_match = bool(
                prior_finding.location
                and finding.location
                and same_file(finding.location.file, prior_finding.location)
            )
            if desc_match or loc_match:
                prior_mentioned = True
                already_addressed = prior_finding.addressed
                break

        if CONFLICT_MARKER in finding.description.lower():
            conflicts = any(
                self.text_similarity.contains_fragment(
                    finding.description, assumption, ASSUMPTION_MATCH_CHARS
                )
                for assumption in prior.assumptions
            )

        return verified.model_copy(
            update={
                "cross_check": CrossCheckResult(
                    already_addressed=already_addressed,
                    conflicts_with_prior=conflicts,
                    prior_mentioned=prior_mentioned,
                )
            }
        )
