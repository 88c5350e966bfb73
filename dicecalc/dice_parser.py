import os
import typing

import lark

from dicecalc.pool import DiceError


class DiceToken(typing.NamedTuple):
    amount: int
    faces: int


class ModifierToken(typing.NamedTuple):
    value: int


class QueryToken(typing.NamedTuple):
    target: int


class QuickToken(typing.NamedTuple):
    pass


class PlotToken(typing.NamedTuple):
    path: str


Token = typing.Union[DiceToken, ModifierToken, QueryToken, QuickToken, PlotToken]


@lark.v_args(inline=True)
class _TokenParser(lark.Transformer):
    quick = QuickToken

    def dice(self, amount: lark.Token, faces: lark.Token) -> DiceToken:
        if int(amount) < 1:
            raise DiceError("attempted to roll %s dice" % amount)
        if int(faces) < 1:
            raise DiceError("attempted to roll a die with %s faces" % faces)
        return DiceToken(int(amount), int(faces))

    def modifier(self, sign: lark.Token, value: lark.Token) -> ModifierToken:
        return ModifierToken(-int(value) if sign == "-" else int(value))

    def query(self, target: lark.Token) -> QueryToken:
        return QueryToken(int(target))

    def plot(self, path: lark.Token) -> PlotToken:
        return PlotToken(str(path))


_grammar_file = os.path.join(os.path.dirname(__file__), "dice.lark")
_grammar = lark.Lark(open(_grammar_file), parser="lalr")


def parse_token(text: str) -> Token:
    try:
        return _TokenParser().transform(_grammar.parse(text))
    except lark.exceptions.VisitError as e:
        raise e.orig_exc
    except lark.exceptions.UnexpectedInput:
        raise DiceError("Could not parse value '%s'" % text)


class Arguments:
    def __init__(self) -> None:
        self.dice: typing.List[typing.Tuple[int, int]] = []
        self.modifier = 0
        self.queries: typing.List[int] = []
        self.quick = False
        self.plot: typing.Optional[str] = None


def parse_arguments(args: typing.Iterable[str]) -> Arguments:
    result = Arguments()
    for arg in args:
        token = parse_token(arg)
        if isinstance(token, DiceToken):
            result.dice.append((token.amount, token.faces))
        elif isinstance(token, ModifierToken):
            result.modifier += token.value
        elif isinstance(token, QueryToken):
            result.queries.append(token.target)
        elif isinstance(token, QuickToken):
            result.quick = True
        elif isinstance(token, PlotToken):
            result.plot = token.path

    if len(result.dice) == 0:
        raise DiceError("Could not parse any dice from arguments")
    if result.quick and result.queries:
        raise DiceError("-q cannot be combined with -s: queries")
    if result.quick and result.plot is not None:
        raise DiceError("-q cannot be combined with -p: plots")
    result.queries.sort()
    return result
