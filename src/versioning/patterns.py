"""Artifact location patterns: parsing and non-revision token substitution.

A pattern such as ``[organisation]/[module]/[revision]/[artifact]-[revision](-[classifier]).[ext]``
is parsed into literal runs, placeholders and Ivy optional groups. Substitution
fills every placeholder from the module coordinate and artifact descriptor,
except ``[revision]`` which is kept as a marker for the version lister.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from constants import Constants
from .models import ArtifactName, ModuleIdentifier, PatternLayout

REVISION_MARKER = "[revision]"


class TokenKind(Enum):
    """Placeholders understood in artifact patterns."""
    ORGANISATION = "organisation"
    MODULE = "module"
    REVISION = "revision"
    ARTIFACT = "artifact"
    TYPE = "type"
    EXT = "ext"
    CLASSIFIER = "classifier"

    @classmethod
    def from_spelling(cls, spelling: str) -> Optional["TokenKind"]:
        """Return the kind for a bracketed token name, or None if unknown."""
        return _SPELLINGS.get(spelling)


_SPELLINGS: Dict[str, TokenKind] = {
    "organisation": TokenKind.ORGANISATION,
    "organization": TokenKind.ORGANISATION,
    "module": TokenKind.MODULE,
    "revision": TokenKind.REVISION,
    "artifact": TokenKind.ARTIFACT,
    "type": TokenKind.TYPE,
    "ext": TokenKind.EXT,
    "classifier": TokenKind.CLASSIFIER,
}


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    kind: TokenKind
    spelling: str

    @property
    def text(self) -> str:
        return f"[{self.spelling}]"


@dataclass(frozen=True)
class OptionalGroup:
    """Ivy optional part: emitted only when every placeholder inside has a value."""
    segments: Tuple[Union[Literal, Placeholder], ...]


Segment = Union[Literal, Placeholder, OptionalGroup]


def _read_placeholder(text: str, start: int) -> Tuple[Optional[Placeholder], int]:
    """Try to read ``[name]`` at ``start``; return (placeholder, index after it)."""
    close = text.find("]", start + 1)
    if close == -1:
        return None, start
    name = text[start + 1:close]
    if "[" in name:
        return None, start
    kind = TokenKind.from_spelling(name)
    if kind is None:
        return None, start
    return Placeholder(kind, name), close + 1


def _matching_paren(text: str, start: int) -> int:
    """Index of the ``)`` closing the ``(`` at ``start``, or -1."""
    depth = 0
    for position in range(start, len(text)):
        if text[position] == "(":
            depth += 1
        elif text[position] == ")":
            depth -= 1
            if depth == 0:
                return position
    return -1


def _parse(text: str, allow_groups: bool) -> List[Segment]:
    segments: List[Segment] = []
    literal: List[str] = []

    def flush() -> None:
        if literal:
            segments.append(Literal("".join(literal)))
            literal.clear()

    index = 0
    while index < len(text):
        char = text[index]
        if char == "[":
            placeholder, end = _read_placeholder(text, index)
            if placeholder is not None:
                flush()
                segments.append(placeholder)
                index = end
                continue
        elif char == "(" and allow_groups:
            close = _matching_paren(text, index)
            inner = text[index + 1:close] if close != -1 else ""
            if close != -1 and "(" in inner:
                # Nested parentheses are not optional groups; keep the whole span.
                literal.append(text[index:close + 1])
                index = close + 1
                continue
            if close != -1:
                inner_segments = _parse(inner, allow_groups=False)
                if any(isinstance(seg, Placeholder) for seg in inner_segments):
                    flush()
                    segments.append(OptionalGroup(tuple(inner_segments)))  # type: ignore[arg-type]
                    index = close + 1
                    continue
        literal.append(char)
        index += 1

    flush()
    return segments


def parse_pattern(text: str) -> List[Segment]:
    """Parse a pattern string into literal, placeholder and optional-group segments.

    Unknown bracketed tokens, unmatched brackets and parentheses without a
    placeholder inside are kept as literal text; parsing never fails.
    """
    return _parse(text, allow_groups=True)


def _render(placeholder: Placeholder, values: Dict[TokenKind, Optional[str]]) -> Optional[str]:
    if placeholder.kind is TokenKind.REVISION:
        return REVISION_MARKER
    return values.get(placeholder.kind)


def substitute_tokens(segments: List[Segment], values: Dict[TokenKind, Optional[str]]) -> str:
    """Replace every non-revision placeholder by its value.

    Args:
        segments: Parsed pattern.
        values: Token values; a missing or None value means "no value".

    Returns:
        The pattern text with ``[revision]`` as the only remaining marker
        (placeholders without a value outside optional groups stay verbatim).
    """
    out: List[str] = []
    for segment in segments:
        if isinstance(segment, Literal):
            out.append(segment.text)
        elif isinstance(segment, Placeholder):
            value = _render(segment, values)
            out.append(segment.text if value is None else value)
        else:
            rendered: List[str] = []
            for inner in segment.segments:
                if isinstance(inner, Literal):
                    rendered.append(inner.text)
                    continue
                value = _render(inner, values)
                if not value:
                    break
                rendered.append(value)
            else:
                out.extend(rendered)
    return "".join(out)


class ResourcePattern:
    """An artifact location pattern bound to a repository layout flavour."""

    label = "Resource"

    def __init__(self, pattern: str):
        self.pattern = pattern
        self.segments = parse_pattern(pattern)

    def _organisation(self, module: ModuleIdentifier) -> str:
        return module.group

    def token_values(self, module: ModuleIdentifier, artifact: ArtifactName) -> Dict[TokenKind, Optional[str]]:
        return {
            TokenKind.ORGANISATION: self._organisation(module),
            TokenKind.MODULE: module.name,
            TokenKind.ARTIFACT: artifact.name,
            TokenKind.TYPE: artifact.type,
            TokenKind.EXT: artifact.extension,
            TokenKind.CLASSIFIER: artifact.classifier,
        }

    def to_version_list_pattern(self, module: ModuleIdentifier, artifact: ArtifactName) -> str:
        """Substitute everything but the revision token for one module/artifact."""
        return substitute_tokens(self.segments, self.token_values(module, artifact))

    def __str__(self) -> str:
        return f"{self.label} pattern '{self.pattern}'"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pattern!r})"

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.pattern == self.pattern  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.pattern))


class IvyResourcePattern(ResourcePattern):
    """Ivy pattern: organisation substituted verbatim."""

    label = "Ivy"


class M2ResourcePattern(ResourcePattern):
    """Maven 2 pattern: organisation dots become path separators."""

    label = "M2"

    def _organisation(self, module: ModuleIdentifier) -> str:
        return module.group.replace(".", "/")


def create_pattern(text: str, m2compatible: bool = False) -> ResourcePattern:
    """Wrap a raw pattern string in the matching ResourcePattern type."""
    if m2compatible:
        return M2ResourcePattern(text)
    return IvyResourcePattern(text)


def default_patterns(layout: PatternLayout, m2compatible: bool = False) -> List[ResourcePattern]:
    """Return the artifact patterns of a well-known repository layout."""
    if layout is PatternLayout.MAVEN:
        return [M2ResourcePattern(p) for p in Constants.MAVEN_LAYOUT_PATTERNS]
    if layout is PatternLayout.IVY:
        texts = Constants.IVY_LAYOUT_PATTERNS
    else:
        texts = Constants.GRADLE_LAYOUT_PATTERNS
    return [create_pattern(p, m2compatible) for p in texts]
