import json

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Optional, Sequence, Tuple

from typing_extensions import Self

from .consts import DEFAULT_COLORS
from .consts import DEFAULT_COLOR_COUNT
from .consts import DEFAULT_ERROR_COLOR
from .consts import PACKAGE_NAME
from .errors import ColorSchemeError


def color_level_for(depth: int, color_count: int) -> int:
    if color_count < 1:
        raise ColorSchemeError(f'color count must be positive: {color_count}')
    return depth % color_count


def _nearest_color(color: str):
    """
    Assume the input color is well-formed
    """
    c = int(color[1:7], 16)
    r, g, b = (c >> 16) & 0xff, (c >> 8) & 0xff, c & 0xff
    r = r + (1 if r < 255 else -1)
    return f'#{r:02x}{g:02x}{b:02x}'


@dataclass(frozen=True)
class ColorScheme:
    """
    A rainbow palette and the number of color levels depths cycle through.
    `count` defaults to the palette size; a larger count reuses the palette
    colors in turn without storing one color per level.
    """
    colors: Tuple[str, ...] = DEFAULT_COLORS
    error_color: str = DEFAULT_ERROR_COLOR
    count: Optional[int] = None

    def __post_init__(self):
        if not self.colors:
            raise ColorSchemeError('color cycle is empty')
        if self.count is not None and self.count < 1:
            raise ColorSchemeError(
                f'color count must be positive: {self.count}')
        object.__setattr__(self, 'colors', tuple(self.colors))

    @classmethod
    def with_count(cls, color_count: int = DEFAULT_COLOR_COUNT) -> Self:
        return cls(DEFAULT_COLORS, count=color_count)

    @classmethod
    def default_rainbow(cls) -> Self:
        return cls()

    @property
    def color_count(self) -> int:
        if self.count is None:
            return len(self.colors)
        return self.count

    def level_for(self, depth: int) -> int:
        return color_level_for(depth, self.color_count)

    def color_for(self, level: int) -> str:
        return self.colors[level % self.color_count % len(self.colors)]

    def scope_for(self, level: int, syntax: str = '') -> str:
        if syntax:
            return f'{syntax}.l{level}._rb'
        return f'l{level}._rb'

    def error_scope(self, syntax: str = '') -> str:
        if syntax:
            return f'{syntax}.error._rb'
        return 'error._rb'

    def scope_color_pairs(self, syntax: str = '') -> List[Tuple[str, str]]:
        pairs = [
            (self.scope_for(level, syntax), color)
            for level, color in enumerate(self.colors[:self.color_count])
        ]
        pairs.append((self.error_scope(syntax), self.error_color))
        return pairs

    def rules(self, background: str, syntax: str = '') -> List[Dict[str, str]]:
        """
        Color scheme rules for an editor whose background is `background`.
        Rainbow scopes sit on a background one step away from the editor's
        so the host does not merge them with plain text, the error scope
        keeps the editor background.
        """
        rules = _generate_rules(
            tuple(self.scope_color_pairs(syntax)), background)
        return [dict(rule) for rule in rules]

    def dumps(self, background: str, syntax: str = '') -> str:
        return json.dumps(
            {
                "author": PACKAGE_NAME,
                "variables": {},
                "rules": self.rules(background, syntax)
            }
        )


@lru_cache
def _generate_rules(
    scope_colors: Sequence[Tuple[str, str]],
    bg: str
) -> Tuple[Dict[str, Any], ...]:
    rules = []
    nearest_bg = _nearest_color(bg)
    for scope, color in scope_colors:
        if scope.endswith('error._rb'):
            background = bg
        else:
            background = nearest_bg
        rules.append({
            "scope": scope,
            "foreground": color,
            "background": background
        })
    return tuple(rules)
