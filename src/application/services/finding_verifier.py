import os
import re
from pathlib import Path

from loguru import logger

from src.domain.entities.finding import Finding
from src.domain.entities.verified_finding import VerificationResult, VerifiedFinding
from src.infrastructure.filesystem.file_cache import FileCache, is_within

TRAVERSAL_PENALTY = 0.05
MISSING_FILE_PENALTY = 0.1
INVALID_LINE_PENALTY = 0.3
EVIDENCE_MISMATCH_PENALTY = 0.5
EVIDENCE_MATCH_BOOST = 1.2

EVIDENCE_MATCH_CHARS = 50

_WHITESPACE = re.compile(r"\s+")


def normalize_code(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def evidence_matches(evidence: str, line: str) -> bool:
    """Fuzzy check that the claimed evidence is what the line actually holds."""
    evidence_clean = normalize_code(evidence)
    line_clean = normalize_code(line)
    return (
        evidence_clean[:EVIDENCE_MATCH_CHARS] in line_clean
        or line_clean[:EVIDENCE_MATCH_CHARS] in evidence_clean
    )


class FindingVerifier:
    """Checks a finding's file, line and evidence claims against the working tree."""

    def verify(
        self,
        finding: Finding,
        working_dir: str | Path,
        cache: FileCache | None = None,
    ) -> VerifiedFinding:
        root = Path(os.path.normpath(os.path.abspath(working_dir)))
        location = finding.location

        if location is None:
            return VerifiedFinding(
                finding=finding,
                verification=VerificationResult(),
                adjusted_confidence=finding.confidence,
            )

        if not is_within(root, location.file):
            logger.warning("Path traversal blocked for finding {}: {}", finding.id, location.file)
            return VerifiedFinding(
                finding=finding,
                verification=VerificationResult(
                    file_exists=False,
                    verification_notes=f"Path traversal blocked: {location.file}",
                ),
                adjusted_confidence=_clamp(finding.confidence * TRAVERSAL_PENALTY),
            )

        cache = cache or FileCache(root)
        file_exists = True
        line_valid = True
        code_snippet_matches: bool | None = None
        notes: str | None = None

        try:
            if not cache.exists(location.file):
                file_exists = False
                notes = f"File not found: {location.file}"
            elif location.line_start:
                lines = cache.get_lines(location.file)
                if lines is None:
                    notes = f"Error reading file: {location.file}"
                elif location.line_start > len(lines):
                    line_valid = False
                    notes = (
                        f"Line {location.line_start} exceeds file length ({len(lines)} lines)"
                    )
                elif finding.evidence:
                    line = lines[location.line_start - 1]
                    code_snippet_matches = evidence_matches(finding.evidence, line)
                    if not code_snippet_matches:
                        notes = f"Code at line {location.line_start} doesn't match evidence"
        except OSError as e:
            notes = f"Error reading file: {e}"

        verification = VerificationResult(
            file_exists=file_exists,
            line_valid=line_valid,
            code_snippet_matches=code_snippet_matches,
            verification_notes=notes,
        )
        adjusted = _adjust_confidence(finding.confidence, verification)
        logger.debug(
            "Verified finding {}: confidence {:.2f} -> {:.2f}",
            finding.id,
            finding.confidence,
            adjusted,
        )
        return VerifiedFinding(
            finding=finding,
            verification=verification,
            adjusted_confidence=adjusted,
        )


def _adjust_confidence(confidence: float, verification: VerificationResult) -> float:
    if not verification.file_exists:
        confidence *= MISSING_FILE_PENALTY
    elif not verification.line_valid:
        confidence *= INVALID_LINE_PENALTY
    elif verification.code_snippet_matches is False:
        confidence *= EVIDENCE_MISMATCH_PENALTY
    elif verification.code_snippet_matches is True:
        confidence *= EVIDENCE_MATCH_BOOST
    return _clamp(confidence)


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))
