from pydantic import BaseModel, Field

from src.domain.value_objects.code_location import CodeLocation
from src.domain.value_objects.review_enums import FindingCategory, Severity


class Finding(BaseModel, frozen=True):
    """One issue reported by a reviewer.

    `id` is only unique within a single reviewer's output.
    """

    id: str
    category: FindingCategory
    severity: Severity
    confidence: float = Field(ge=0.0, le=1.0)
    title: str = Field(max_length=120)
    description: str
    location: CodeLocation | None = None
    evidence: str | None = None
    suggestion: str | None = None
    cwe_id: str | None = Field(default=None, pattern=r"^CWE-\d+$")
    owasp_category: str | None = None
    tags: list[str] = Field(default_factory=list)
