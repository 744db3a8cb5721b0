from __future__ import annotations

from .classifier   import HeuristicAnglePolicy
from .classifier   import StrictAnglePolicy
from .classifier   import classify
from .classifier   import is_likely_generic
from .color_scheme import ColorScheme
from .color_scheme import color_level_for
from .errors       import BracketColorizerError
from .errors       import ColorSchemeError
from .errors       import SettingsError
from .errors       import TransportError
from .executor     import BracketMatcher
from .executor     import analyze
from .lexer        import LexicalContext
from .logger       import Logger
from .manager      import BracketColorizerManager
from .model        import Bracket
from .model        import BracketCollection
from .model        import BracketPair
from .model        import BracketSide
from .model        import BracketType
from .model        import Language
from .model        import Position
from .model        import ReasonKind
from .model        import Statistics
from .model        import UnmatchedBracket
from .model        import UnmatchedReason
from .transport    import BufferRegistry
from .transport    import handle_request
from .tree         import BracketTree
from .tree         import build_bracket_trees
from .tree         import enclosing_pairs
from .tree         import nearest_pair


__all__ = (
    # scanning
    'analyze',
    'BracketMatcher',
    'LexicalContext',
    'classify',
    'is_likely_generic',
    'HeuristicAnglePolicy',
    'StrictAnglePolicy',
    # results
    'Bracket',
    'BracketCollection',
    'BracketPair',
    'BracketSide',
    'BracketType',
    'Language',
    'Position',
    'ReasonKind',
    'Statistics',
    'UnmatchedBracket',
    'UnmatchedReason',
    # colors
    'ColorScheme',
    'color_level_for',
    # cursor lookup
    'BracketTree',
    'build_bracket_trees',
    'enclosing_pairs',
    'nearest_pair',
    # configuration and host
    'BracketColorizerManager',
    'BufferRegistry',
    'handle_request',
    'Logger',
    # errors
    'BracketColorizerError',
    'ColorSchemeError',
    'SettingsError',
    'TransportError',
)
