from .config import DEFAULT_MARKER
from .models.position import Position


def sanitize(posn: Position, marker: str = DEFAULT_MARKER) -> Position:
    """Strip the workspace root from an absolute filename.

    Everything up to and including the first `/<marker>/` segment is
    removed, typically a gnarly temporary directory. The result is relative,
    so sanitizing twice changes nothing.
    """
    # TODO: handle Windows drive letters and backslash separators.
    filename = posn.filename
    if not filename.startswith("/"):
        return posn
    segment = f"/{marker}/"
    i = filename.find(segment)
    if i < 0:
        return posn
    return posn.model_copy(update={"filename": filename[i + len(segment):].lstrip("/")})
