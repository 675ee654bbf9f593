import re

from pydantic import BaseModel, ConfigDict

from .position import Position


class Expectation(BaseModel):
    """A finding the test author declared with a `want` comment."""

    model_config = ConfigDict(frozen=True)
    position: Position
    pattern: re.Pattern

    def matches(self, message: str) -> bool:
        # search, not fullmatch: the pattern may appear anywhere in the message
        return self.pattern.search(message) is not None
