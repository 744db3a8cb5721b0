import time

from typing import List, Optional, Sequence

from .classifier import AnglePolicy
from .classifier import HeuristicAnglePolicy
from .classifier import classify
from .color_scheme import ColorScheme
from .lexer import LexicalContext
from .logger import Logger
from .model import (
    Bracket,
    BracketCollection,
    BracketPair,
    BracketSide,
    BracketType,
    Language,
    Statistics,
    UnmatchedBracket,
    UnmatchedReason,
)


class BracketMatcher():
    """
    Stack based bracket matcher.

    One forward pass over the text: opening brackets are pushed, closing
    brackets pop the stack and either pair with the popped bracket or,
    when the types differ, leave both ends unmatched. Whatever is still
    open at the end is reported as missing its closing bracket.

    The matcher holds configuration only, every call to `match_brackets`
    works on its own context and stack.
    """

    def __init__(
        self,
        color_scheme: Optional[ColorScheme] = None,
        angle_policy: Optional[AnglePolicy] = None
    ):
        self.color_scheme = color_scheme or ColorScheme.default_rainbow()
        self.angle_policy = angle_policy or HeuristicAnglePolicy()

    def analyze(self, content: str, language: Language) -> BracketCollection:
        return self.match_brackets(content, language)

    def match_brackets(
        self,
        content: str,
        language: Language = Language.GENERIC
    ) -> BracketCollection:
        start = time.time()

        pairs: List[BracketPair] = []
        unmatched: List[UnmatchedBracket] = []
        stack: List[Bracket] = []
        max_depth = 0

        context = LexicalContext()
        check_angles = language.uses_angle_brackets_as_generics()
        is_bracket = self.angle_policy.is_bracket
        level_for = self.color_scheme.level_for

        i, length = 0, len(content)
        while i < length:
            width, in_code = context.step(content, i)
            kind = in_code and classify(content[i])
            if kind:
                bracket_type, side = kind
                if (bracket_type is BracketType.ANGLE and check_angles and
                    not is_bracket(content, i)):
                    kind = None

            if kind:
                depth = len(stack)
                bracket = Bracket(
                    bracket_type, side, context.position(),
                    depth, level_for(depth)
                )
                if side is BracketSide.OPENING:
                    stack.append(bracket)
                    if depth > max_depth:
                        max_depth = depth
                elif stack:
                    opening = stack.pop()
                    if opening.type is bracket_type:
                        pairs.append(BracketPair(opening, bracket))
                    else:
                        unmatched.append(UnmatchedBracket(
                            bracket,
                            UnmatchedReason.type_mismatch(
                                opening.type, bracket_type)
                        ))
                        unmatched.append(UnmatchedBracket(
                            opening,
                            UnmatchedReason.type_mismatch(
                                bracket_type, opening.type)
                        ))
                else:
                    unmatched.append(UnmatchedBracket(
                        bracket, UnmatchedReason.missing_opening()))

            context.advance(content, i, width)
            i += width

        while stack:
            unmatched.append(UnmatchedBracket(
                stack.pop(), UnmatchedReason.missing_closing()))

        end = time.time()
        result = BracketCollection(
            pairs=tuple(pairs),
            unmatched=tuple(unmatched),
            max_depth=max_depth,
            statistics=Statistics.from_pairs(pairs),
            elapsed_ms=(end - start) * 1000
        )
        if Logger.debug:
            Logger.print(
                '\n\t'.join([
                    f'Matched brackets in {language.value} text',
                    f'length: {length}',
                    f'pairs: {len(result.pairs)}',
                    f'unmatched: {len(result.unmatched)}',
                    f'max depth: {max_depth}',
                    f'cost time: {end - start:>.5f}'
                ])
            )
        return result


def analyze(
    content: str,
    language: Language = Language.GENERIC,
    color_scheme: Optional[ColorScheme] = None
) -> BracketCollection:
    return BracketMatcher(color_scheme).match_brackets(content, language)


def count_brackets_in_code(
    content: str,
    brackets: Sequence[str] = '()[]{}'
) -> int:
    """
    Number of characters from `brackets` that sit in plain code, outside
    strings and comments.
    """
    context = LexicalContext()
    count = 0
    i, length = 0, len(content)
    while i < length:
        width, in_code = context.step(content, i)
        if in_code and content[i] in brackets:
            count += 1
        context.advance(content, i, width)
        i += width
    return count
