from pydantic import BaseModel, ConfigDict

from .position import Position


class Finding(BaseModel):
    """A diagnostic reported by the analysis under test."""

    model_config = ConfigDict(frozen=True, extra="ignore")
    position: Position
    message: str
    code: str = ""
