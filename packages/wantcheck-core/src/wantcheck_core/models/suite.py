from pydantic import BaseModel, ConfigDict, Field, field_validator


class SuiteCaseRec(BaseModel):
    """One `run` invocation described in a suite file."""

    model_config = ConfigDict(extra="ignore")
    name: str
    root: str
    analysis: str
    packages: list[str] = Field(min_length=1)
    marker: str | None = None

    @field_validator("packages", mode="before")
    @classmethod
    def _coerce_list(cls, v):
        if isinstance(v, str):
            return [v]
        return v


class SuiteRec(BaseModel):
    """A suite file: a list of cases run in order."""

    model_config = ConfigDict(extra="ignore")
    suites: list[SuiteCaseRec]
