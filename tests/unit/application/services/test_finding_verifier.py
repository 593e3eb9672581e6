"""Tests for FindingVerifier."""

from pathlib import Path

import pytest

from src.application.services.finding_verifier import FindingVerifier, evidence_matches
from src.infrastructure.filesystem.file_cache import FileCache


@pytest.fixture
def verifier() -> FindingVerifier:
    return FindingVerifier()


class TestPathTraversal:
    def test_blocks_parent_traversal(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        finding = finding_factory(file="../../../etc/passwd", line_start=1)

        result = verifier.verify(finding, workdir)

        assert result.verification.file_exists is False
        assert "Path traversal blocked" in (result.verification.verification_notes or "")
        assert result.adjusted_confidence < 0.1

    def test_blocks_absolute_path(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        finding = finding_factory(file="/etc/passwd", line_start=1)

        result = verifier.verify(finding, workdir)

        assert result.verification.file_exists is False
        assert "Path traversal blocked" in (result.verification.verification_notes or "")

    def test_blocks_sibling_directory(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        (workdir.parent / "sibling").mkdir()
        (workdir.parent / "sibling" / "file.ts").write_text("x", encoding="utf-8")
        finding = finding_factory(file="../sibling/file.ts", line_start=1)

        result = verifier.verify(finding, workdir)

        assert result.verification.file_exists is False
        assert result.adjusted_confidence == pytest.approx(0.8 * 0.05)

    def test_blocks_prefix_sharing_sibling(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        finding = finding_factory(file=f"../{workdir.name}-other/a.ts")

        result = verifier.verify(finding, workdir)

        assert "Path traversal blocked" in (result.verification.verification_notes or "")

    def test_traversal_check_does_not_touch_cache(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        cache = FileCache(workdir)
        verifier.verify(finding_factory(file="../../../etc/passwd"), workdir, cache)

        assert cache.get_stats().files_checked == 0

    def test_allows_dot_prefix(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        result = verifier.verify(finding_factory(file="./test.ts", line_start=1), workdir)
        assert result.verification.file_exists is True

    def test_allows_inner_parent_segments(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        result = verifier.verify(finding_factory(file="subdir/../test.ts"), workdir)
        assert result.verification.file_exists is True


class TestVerify:
    def test_no_location_is_unfalsifiable(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        finding = finding_factory()

        result = verifier.verify(finding, workdir)

        assert result.verification.file_exists is True
        assert result.verification.line_valid is True
        assert result.verification.code_snippet_matches is None
        assert result.adjusted_confidence == finding.confidence

    def test_valid_line(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        result = verifier.verify(finding_factory(file="test.ts", line_start=2), workdir)

        assert result.verification.file_exists is True
        assert result.verification.line_valid is True
        assert result.adjusted_confidence == pytest.approx(0.8)

    def test_missing_file(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        finding = finding_factory(file="nonexistent.ts", line_start=1)

        result = verifier.verify(finding, workdir)

        assert result.verification.file_exists is False
        assert result.verification.verification_notes == "File not found: nonexistent.ts"
        assert result.adjusted_confidence == pytest.approx(0.08)

    def test_line_beyond_file(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        result = verifier.verify(finding_factory(file="test.ts", line_start=999), workdir)

        assert result.verification.file_exists is True
        assert result.verification.line_valid is False
        assert "exceeds file length" in (result.verification.verification_notes or "")
        assert result.adjusted_confidence == pytest.approx(0.24)

    def test_trailing_newline_line_is_valid(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        result = verifier.verify(finding_factory(file="existing.ts", line_start=4), workdir)
        assert result.verification.line_valid is True

        result = verifier.verify(finding_factory(file="existing.ts", line_start=5), workdir)
        assert result.verification.line_valid is False
        assert "(4 lines)" in (result.verification.verification_notes or "")

    def test_matching_evidence_boosts_confidence(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        finding = finding_factory(file="test.ts", line_start=2, evidence="const y = 2;")

        result = verifier.verify(finding, workdir)

        assert result.verification.code_snippet_matches is True
        assert result.adjusted_confidence >= finding.confidence
        assert result.adjusted_confidence == pytest.approx(0.96)

    def test_partial_evidence_matches(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        finding = finding_factory(file="test.ts", line_start=2, evidence="const y = 2")
        assert verifier.verify(finding, workdir).verification.code_snippet_matches is True

    def test_boost_is_capped(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        finding = finding_factory(
            file="test.ts", line_start=1, evidence="const x = 1;", confidence=0.95
        )
        assert verifier.verify(finding, workdir).adjusted_confidence == 1.0

    def test_mismatched_evidence(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        finding = finding_factory(
            file="test.ts", line_start=2, evidence="completely different code"
        )

        result = verifier.verify(finding, workdir)

        assert result.verification.code_snippet_matches is False
        assert result.adjusted_confidence < finding.confidence
        assert result.adjusted_confidence == pytest.approx(0.4)
        assert "doesn't match evidence" in (result.verification.verification_notes or "")

    def test_evidence_ignored_without_line(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        finding = finding_factory(file="test.ts", evidence="completely different code")
        assert verifier.verify(finding, workdir).verification.code_snippet_matches is None

    def test_unreadable_file_is_noted_not_raised(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        (workdir / "binary.bin").write_bytes(b"\xff\xfe\x00\x81")
        finding = finding_factory(file="binary.bin", line_start=1, evidence="x")

        result = verifier.verify(finding, workdir)

        assert result.verification.file_exists is True
        assert result.verification.line_valid is True
        assert result.verification.code_snippet_matches is None
        assert "Error reading file" in (result.verification.verification_notes or "")
        assert result.adjusted_confidence == finding.confidence

    def test_io_error_is_recorded_as_note(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        class DeniedCache(FileCache):
            def get_lines(self, relative_path: str) -> list[str] | None:
                raise PermissionError("permission denied")

        finding = finding_factory(file="test.ts", line_start=1, evidence="const x = 1;")

        result = verifier.verify(finding, workdir, DeniedCache(workdir))

        assert result.verification.file_exists is True
        assert result.verification.line_valid is True
        assert result.verification.code_snippet_matches is None
        assert result.verification.verification_notes == (
            "Error reading file: permission denied"
        )
        assert result.adjusted_confidence == finding.confidence

    def test_uses_cache(
        self, verifier: FindingVerifier, finding_factory, workdir: Path
    ) -> None:
        cache = FileCache(workdir)
        finding = finding_factory(file="test.ts", line_start=1)

        for _ in range(3):
            verifier.verify(finding, workdir, cache)

        assert cache.get_stats().files_loaded == 1

    @pytest.mark.parametrize("confidence", [0.0, 0.5, 1.0])
    def test_adjusted_confidence_in_bounds(
        self,
        verifier: FindingVerifier,
        finding_factory,
        workdir: Path,
        confidence: float,
    ) -> None:
        for file, line, evidence in [
            ("test.ts", 1, "const x = 1;"),
            ("test.ts", 1, "nope"),
            ("test.ts", 50, None),
            ("missing.ts", 1, None),
            ("../escape.ts", 1, None),
        ]:
            finding = finding_factory(
                file=file, line_start=line, evidence=evidence, confidence=confidence
            )
            adjusted = verifier.verify(finding, workdir).adjusted_confidence
            assert 0.0 <= adjusted <= 1.0


class TestEvidenceMatches:
    def test_whitespace_is_normalized(self) -> None:
        assert evidence_matches("const   y =\n  2;", "    const y = 2;")

    def test_line_inside_longer_evidence(self) -> None:
        assert evidence_matches("const y = 2;\nconst z = 3;", "const y = 2;")

    def test_different_code(self) -> None:
        assert not evidence_matches("return None", "const y = 2;")
