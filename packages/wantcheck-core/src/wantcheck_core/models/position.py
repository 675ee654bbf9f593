from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """A file/line location. Columns are never kept."""

    model_config = ConfigDict(frozen=True, extra="ignore")
    filename: str
    line: int = Field(ge=0)

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"
