from pydantic import BaseModel, Field


class PriorFinding(BaseModel, frozen=True):
    category: str
    description: str
    location: str | None = None
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    addressed: bool = False


class PriorAnalysis(BaseModel, frozen=True):
    """Analysis produced before the reviewers ran, used for cross-checking."""

    summary: str = ""
    findings: list[PriorFinding] = Field(default_factory=list)
    assumptions: list[str] = Field(default_factory=list)
