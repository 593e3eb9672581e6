from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from src.domain.entities.finding import Finding
from src.domain.entities.review_output import (
    Agreement,
    Disagreement,
    ReviewOutput,
    RiskAssessment,
)
from src.domain.value_objects.code_location import CodeLocation
from src.domain.value_objects.review_enums import (
    AgreementAssessment,
    DisagreementIssue,
    FindingCategory,
    RiskLevel,
    Severity,
)


@pytest.fixture
def finding_factory() -> Callable[..., Finding]:
    def _create(
        file: str | None = None,
        line_start: int | None = None,
        **overrides: Any,
    ) -> Finding:
        data: dict[str, Any] = {
            "id": "test-1",
            "category": FindingCategory.CORRECTNESS,
            "severity": Severity.MEDIUM,
            "confidence": 0.8,
            "title": "Test finding",
            "description": "Test description",
        }
        if file is not None:
            data["location"] = CodeLocation(file=file, line_start=line_start)
        data.update(overrides)
        return Finding(**data)

    return _create


@pytest.fixture
def review_factory() -> Callable[..., ReviewOutput]:
    def _create(
        reviewer: str = "codex",
        findings: list[Finding] | None = None,
        agreements: list[str] | None = None,
        disagreements: list[str] | None = None,
        risk_level: RiskLevel = RiskLevel.MEDIUM,
        risk_score: float = 50,
        concerns: list[str] | None = None,
        mitigations: list[str] | None = None,
    ) -> ReviewOutput:
        return ReviewOutput(
            reviewer=reviewer,
            findings=findings or [],
            agreements=[
                Agreement(
                    original_claim=claim,
                    assessment=AgreementAssessment.CORRECT,
                    confidence=0.8,
                )
                for claim in agreements or []
            ],
            disagreements=[
                Disagreement(
                    original_claim=claim,
                    issue=DisagreementIssue.INCORRECT,
                    confidence=0.8,
                    reason="Not what the code does",
                )
                for claim in disagreements or []
            ],
            risk_assessment=RiskAssessment(
                overall_level=risk_level,
                score=risk_score,
                summary=f"{reviewer} risk summary",
                top_concerns=concerns or [],
                mitigations=mitigations,
            ),
        )

    return _create


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """A small working tree for verification tests."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "test.ts").write_text("const x = 1;\nconst y = 2;\nconst z = 3;", encoding="utf-8")
    (root / "existing.ts").write_text("line 1\nline 2\nline 3\n", encoding="utf-8")
    (root / "subdir").mkdir()
    (root / "subdir" / "nested.ts").write_text("nested content", encoding="utf-8")
    return root
