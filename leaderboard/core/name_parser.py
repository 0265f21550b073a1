"""Parse player and team names into first/last name, suffix and metadata.

Handles the formats seen on leaderboards:
  - "John Doe", "Robert F. Gerwin"
  - "Paul Schlimm Jr.", "Wyatt Worthington II"
  - "John Doe, Sr." (comma before a suffix)
  - "Christy, Aaron", "Gerwin, Robert F. II" (last name first)
  - "Adam Black (a)" (amateur marker, kept as metadata)
  - "Abel Ferrer + Kyle Tracey" (team; one Name per player)
"""

import re
from dataclasses import asdict, dataclass, field

from .affiliation_parser import Affiliation

TEAM_SEPARATOR = ' + '
AMATEUR_MARKER = '(a)'

# Generational and professional suffixes, with or without periods
SUFFIX_RE = re.compile(
    r'^(Jr\.?|Sr\.?|I{1,3}|IV|VI{0,3}|IX|X|Esq\.?|[MD]D|PhD|DDS|\d+(st|nd|rd|th))$',
    re.IGNORECASE,
)

_BARE_JR_SR_RE = re.compile(r'^(Jr|Sr)$', re.IGNORECASE)


@dataclass
class Name:
    first_name: str
    last_name: str
    suffix: str | None = None
    metadata: list[str] = field(default_factory=list)
    affiliation: Affiliation | None = None

    @property
    def full_name(self) -> str:
        """'Robert F. Gerwin II (a)' from its parts."""
        parts = [p for p in (self.first_name, self.last_name) if p]
        if self.suffix:
            parts.append(self.suffix)
        name = ' '.join(parts)
        if self.metadata:
            name = f"{name} {' '.join(self.metadata)}"
        return name

    @property
    def is_amateur(self) -> bool:
        return AMATEUR_MARKER in self.metadata

    def to_dict(self) -> dict:
        d = asdict(self)
        d.pop('affiliation')
        return d

    def __str__(self) -> str:
        return self.full_name


def parse_name(name):
    """Parse a name into a Name, a list of Names for a team, or None if blank."""
    if name is None or not str(name).strip():
        return None

    name = str(name)
    if TEAM_SEPARATOR in name:
        return [parse_individual(player) for player in name.split(TEAM_SEPARATOR)]

    return parse_individual(name)


def parse_individual(name: str) -> Name:
    name = name.strip()
    metadata = []

    if name.endswith(AMATEUR_MARKER):
        metadata.append(AMATEUR_MARKER)
        name = re.sub(r'\s*\(a\)\s*$', '', name).strip()

    if ',' in name:
        after_comma = name.split(',')[1].strip()
        if SUFFIX_RE.match(after_comma):
            return _parse_comma_suffix(name, metadata)
        return _parse_last_first(name, metadata)

    parts = name.split()
    if not parts:
        return Name(first_name='', last_name='', metadata=metadata)
    if len(parts) == 1:
        return Name(first_name='', last_name=parts[0], metadata=metadata)

    suffix = None
    if SUFFIX_RE.match(parts[-1]):
        suffix = _normalize_suffix(parts.pop())

    last_name = parts.pop()
    return Name(first_name=' '.join(parts), last_name=last_name,
                suffix=suffix, metadata=metadata)


def _parse_comma_suffix(name: str, metadata: list[str]) -> Name:
    """'John Doe, Sr.' -> John / Doe / Sr."""
    parts = [p.strip() for p in name.split(',')]
    suffix = _normalize_suffix(parts[1])

    words = parts[0].split()
    if not words:
        return Name(first_name='', last_name='', suffix=suffix, metadata=metadata)
    if len(words) == 1:
        return Name(first_name='', last_name=words[0], suffix=suffix, metadata=metadata)

    last_name = words.pop()
    return Name(first_name=' '.join(words), last_name=last_name,
                suffix=suffix, metadata=metadata)


def _parse_last_first(name: str, metadata: list[str]) -> Name:
    """'Gerwin, Robert F. II' -> Robert F. / Gerwin / II"""
    parts = [p.strip() for p in name.split(',')]
    last_name = parts[0]
    words = parts[1].split() if len(parts) > 1 else []

    suffix = None
    if words and SUFFIX_RE.match(words[-1]):
        suffix = _normalize_suffix(words.pop())

    return Name(first_name=' '.join(words), last_name=last_name,
                suffix=suffix, metadata=metadata)


def _normalize_suffix(suffix: str) -> str:
    # Jr -> Jr., Sr -> Sr.
    if _BARE_JR_SR_RE.match(suffix):
        return f"{suffix}."
    return suffix
