"""
Package loader.

Resolves a dotted import path (or an fnmatch pattern over import paths)
inside a GOPATH-style project tree, <root>/<marker>/<import/path>, and
parses every file of the match with comments retained.
"""

from __future__ import annotations

import ast
import fnmatch
import io
import tokenize
from dataclasses import dataclass, field
from pathlib import Path

from .config import DEFAULT_MARKER
from .errors import LoadError
from .log import get_logger
from .models.position import Position

_logger = get_logger("loader")

# Tokens that carry no code and so never close a comment block.
_TRIVIA = {tokenize.NL, tokenize.NEWLINE, tokenize.INDENT, tokenize.DEDENT, tokenize.ENDMARKER}


@dataclass(frozen=True)
class Comment:
    line: int
    col: int
    text: str  # raw token, including the leading '#'


@dataclass
class CommentGroup:
    """Adjacent comments with no code between them."""

    comments: list[Comment] = field(default_factory=list)

    @property
    def line(self) -> int:
        return self.comments[0].line

    def text(self) -> str:
        lines = [c.text[1:].lstrip() for c in self.comments]
        return "\n".join(lines).strip()


@dataclass
class SourceFile:
    filename: str
    source: str
    tree: ast.Module
    comments: list[CommentGroup]


@dataclass
class Package:
    name: str
    path: Path
    files: list[SourceFile]

    def position(self, file: SourceFile, line: int) -> Position:
        return Position(filename=file.filename, line=line)


def group_comments(source: str, filename: str = "<unknown>") -> list[CommentGroup]:
    """Collect the comment blocks of a source text.

    A comment trailing code on the same line forms a block of its own.
    Other comments on consecutive lines with no code between them are
    merged into one block; a blank line starts a new one.
    """
    groups: list[CommentGroup] = []
    current: CommentGroup | None = None
    code_line = -1  # last line holding a code token
    try:
        tokens = list(tokenize.generate_tokens(io.StringIO(source).readline))
    except (tokenize.TokenError, SyntaxError) as e:
        raise LoadError(f"{filename}: {e}") from e

    for tok in tokens:
        if tok.type == tokenize.COMMENT:
            line, col = tok.start
            comment = Comment(line=line, col=col, text=tok.string)
            if line == code_line:
                groups.append(CommentGroup(comments=[comment]))
                current = None
            elif current is not None and current.comments[-1].line + 1 == line:
                current.comments.append(comment)
            else:
                current = CommentGroup(comments=[comment])
                groups.append(current)
            continue
        if tok.type in _TRIVIA:
            continue
        # any code token closes the open block
        current = None
        code_line = tok.end[0]
    return groups


def _parse_file(path: Path) -> SourceFile:
    filename = str(path.resolve())
    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise LoadError(f"Unable to decode UTF-8 in {filename}: {e}") from e
    except OSError as e:
        raise LoadError(f"Unable to read {filename}: {e}") from e

    try:
        tree = ast.parse(source, filename=filename)
    except SyntaxError as e:
        raise LoadError(f"{filename}:{e.lineno}: {e.msg}") from e

    return SourceFile(
        filename=filename,
        source=source,
        tree=tree,
        comments=group_comments(source, filename),
    )


def _candidates(src: Path) -> list[tuple[str, Path, list[Path]]]:
    """List every import path under src with its directory/module and files.

    A module and a package directory sharing an import path are both listed.
    """
    found: list[tuple[str, Path, list[Path]]] = []
    pending = [src]
    while pending:
        directory = pending.pop()
        entries = sorted(directory.iterdir())
        modules = [p for p in entries if p.is_file() and p.suffix == ".py"]
        if directory != src and modules:
            found.append((".".join(directory.relative_to(src).parts), directory, modules))
        for module in modules:
            if module.name == "__init__.py":
                continue
            found.append((".".join(module.relative_to(src).with_suffix("").parts), module, [module]))
        pending.extend(
            p for p in entries if p.is_dir() and p.name != "__pycache__" and not p.name.startswith(".")
        )
    return sorted(found, key=lambda c: (c[0], str(c[1])))


def resolve(root: Path | str, pattern: str, marker: str = DEFAULT_MARKER) -> list[tuple[str, Path, list[Path]]]:
    """Return every (import path, location, files) under root matching pattern."""
    src = Path(root) / marker
    if not src.is_dir():
        raise LoadError(f"no {marker!r} directory under {root}")
    return [c for c in _candidates(src) if fnmatch.fnmatchcase(c[0], pattern)]


def load_package(root: Path | str, pkgpath: str, marker: str = DEFAULT_MARKER) -> Package:
    """Load the package matching pkgpath from root, the top of a project tree."""
    matches = resolve(root, pkgpath, marker)
    if len(matches) != 1:
        raise LoadError(f"pattern {pkgpath!r} expanded to {len(matches)} packages, want 1")

    name, path, files = matches[0]
    _logger.debug("Loading %s from %s (%d files)", name, path, len(files))
    return Package(name=name, path=path, files=[_parse_file(f) for f in files])
