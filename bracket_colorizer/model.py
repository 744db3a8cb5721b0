from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True, order=True)
class Position:
    """
    A location in source text. `line` and `column` are 0-based, column
    counts characters, `byte_offset` counts UTF-8 bytes. Positions order
    the way the scanner meets them.
    """
    line: int
    column: int
    byte_offset: int

    def __post_init__(self):
        if self.line < 0 or self.column < 0 or self.byte_offset < 0:
            raise ValueError(
                f'negative position: {self.line}:{self.column}'
                f'@{self.byte_offset}')

    def to_dict(self) -> Dict[str, int]:
        return {
            'line': self.line,
            'column': self.column,
            'byte_offset': self.byte_offset,
        }


class BracketType(Enum):
    ROUND = 'round'
    SQUARE = 'square'
    CURLY = 'curly'
    ANGLE = 'angle'


class BracketSide(Enum):
    OPENING = 'opening'
    CLOSING = 'closing'


@dataclass(frozen=True)
class Bracket:
    type: BracketType
    side: BracketSide
    position: Position
    depth: int
    color_level: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type.value,
            'side': self.side.value,
            'position': self.position.to_dict(),
            'depth': self.depth,
            'color_level': self.color_level,
        }


@dataclass(frozen=True)
class BracketPair:
    opening: Bracket
    closing: Bracket

    def __post_init__(self):
        if self.opening.type != self.closing.type:
            raise ValueError('bracket pair with different types')
        if (self.opening.side != BracketSide.OPENING or
            self.closing.side != BracketSide.CLOSING):
            raise ValueError('bracket pair sides are reversed')

    @property
    def type(self) -> BracketType:
        return self.opening.type

    @property
    def depth(self) -> int:
        return self.opening.depth

    @property
    def color_level(self) -> int:
        return self.opening.color_level

    def to_dict(self) -> Dict[str, Any]:
        return {
            'opening': self.opening.position.to_dict(),
            'closing': self.closing.position.to_dict(),
            'type': self.type.value,
            'depth': self.depth,
            'color_level': self.color_level,
        }


class ReasonKind(Enum):
    MISSING_OPENING = 'missing_opening'
    MISSING_CLOSING = 'missing_closing'
    TYPE_MISMATCH = 'type_mismatch'


@dataclass(frozen=True)
class UnmatchedReason:
    kind: ReasonKind
    expected: Optional[BracketType] = None
    found: Optional[BracketType] = None

    @classmethod
    def missing_opening(cls):
        return cls(ReasonKind.MISSING_OPENING)

    @classmethod
    def missing_closing(cls):
        return cls(ReasonKind.MISSING_CLOSING)

    @classmethod
    def type_mismatch(cls, expected: BracketType, found: BracketType):
        return cls(ReasonKind.TYPE_MISMATCH, expected, found)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            'kind': self.kind.value,
            'expected': self.expected and self.expected.value,
            'found': self.found and self.found.value,
        }


@dataclass(frozen=True)
class UnmatchedBracket:
    bracket: Bracket
    reason: UnmatchedReason

    def to_dict(self) -> Dict[str, Any]:
        return {
            'bracket': self.bracket.to_dict(),
            'reason': self.reason.to_dict(),
        }


@dataclass(frozen=True)
class Statistics:
    round_pairs: int = 0
    square_pairs: int = 0
    curly_pairs: int = 0
    angle_pairs: int = 0

    @classmethod
    def from_pairs(cls, pairs: Tuple[BracketPair, ...]):
        counts = {t: 0 for t in BracketType}
        for pair in pairs:
            counts[pair.type] += 1
        return cls(
            round_pairs=counts[BracketType.ROUND],
            square_pairs=counts[BracketType.SQUARE],
            curly_pairs=counts[BracketType.CURLY],
            angle_pairs=counts[BracketType.ANGLE],
        )

    def total_pairs(self) -> int:
        return (self.round_pairs + self.square_pairs +
                self.curly_pairs + self.angle_pairs)

    def to_dict(self) -> Dict[str, int]:
        return {
            'round_pairs': self.round_pairs,
            'square_pairs': self.square_pairs,
            'curly_pairs': self.curly_pairs,
            'angle_pairs': self.angle_pairs,
            'total_pairs': self.total_pairs(),
        }


@dataclass(frozen=True)
class BracketCollection:
    """
    The result of one scan. Pairs are in the order their closing bracket
    was met, unmatched brackets in the order they were found to be
    unmatched. `elapsed_ms` is left out of equality so two scans of the
    same input compare equal.
    """
    pairs: Tuple[BracketPair, ...] = ()
    unmatched: Tuple[UnmatchedBracket, ...] = ()
    max_depth: int = 0
    statistics: Statistics = field(default_factory=Statistics)
    elapsed_ms: float = field(default=0.0, compare=False)

    def has_errors(self) -> bool:
        return len(self.unmatched) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'pairs': [p.to_dict() for p in self.pairs],
            'unmatched': [u.to_dict() for u in self.unmatched],
            'max_depth': self.max_depth,
            'statistics': self.statistics.to_dict(),
            'elapsed_ms': self.elapsed_ms,
        }


_LANGUAGE_ALIASES = {
    'rs': 'rust',
    'js': 'javascript',
    'jsx': 'javascript',
    'ts': 'typescript',
    'tsx': 'typescript',
    'py': 'python',
    'golang': 'go',
    'h': 'c',
    'c++': 'cpp',
    'cc': 'cpp',
    'cxx': 'cpp',
    'hpp': 'cpp',
    'c#': 'csharp',
    'cs': 'csharp',
    'kt': 'kotlin',
    'kts': 'kotlin',
    'plain text': 'generic',
    'plaintext': 'generic',
    'text': 'generic',
}


class Language(Enum):
    GENERIC = 'generic'
    RUST = 'rust'
    JAVASCRIPT = 'javascript'
    TYPESCRIPT = 'typescript'
    PYTHON = 'python'
    JAVA = 'java'
    GO = 'go'
    DART = 'dart'
    C = 'c'
    CPP = 'cpp'
    CSHARP = 'csharp'
    KOTLIN = 'kotlin'
    SWIFT = 'swift'

    @classmethod
    def from_str(cls, name: Optional[str]) -> 'Language':
        if not isinstance(name, str) or not name:
            return cls.GENERIC
        key = name.strip().lower()
        key = _LANGUAGE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return cls.GENERIC

    def uses_angle_brackets_as_generics(self) -> bool:
        return self in _GENERIC_LANGUAGES


_GENERIC_LANGUAGES = frozenset({
    Language.RUST,
    Language.TYPESCRIPT,
    Language.JAVA,
    Language.DART,
    Language.CPP,
    Language.CSHARP,
    Language.KOTLIN,
    Language.SWIFT,
})
