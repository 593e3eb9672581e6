from pydantic import BaseModel, Field


class CodeLocation(BaseModel, frozen=True):
    file: str = Field(description="Path relative to the working directory")
    line_start: int | None = Field(default=None, ge=1)
    line_end: int | None = Field(default=None, ge=1)
    column_start: int | None = Field(default=None, ge=0)
    column_end: int | None = Field(default=None, ge=0)

    def display(self) -> str:
        """Render as `file` or `file:line`."""
        if self.line_start:
            return f"{self.file}:{self.line_start}"
        return self.file
