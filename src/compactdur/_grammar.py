"""Lark grammar for compact duration text and the tree-to-term builder.

The unit terminals are generated from ``UNIT_SPELLINGS`` so that the
spelling table is the only place units are spelled out.
"""

from __future__ import annotations

from lark import Lark, Token, Tree
from lark.visitors import Interpreter

from compactdur._constants import INT64_MAX
from compactdur._errors import ERR_MSG_NUMBER_TOO_LARGE, NumberError
from compactdur._types import UNIT_SPELLINGS, Term, Unit

START_SEQUENCE = "sequence"
START_TERM = "term"
START_UNIT = "unit"

DIGITS = "DIGITS"
END = "$END"

_GRAMMAR_TEMPLATE = r"""
sequence: (term _SEPARATOR?)+
term: DIGITS unit
unit: %(unit_alternatives)s

DIGITS: /[0-9]+/
_SEPARATOR: " "
%(unit_terminals)s
"""

_INT64_MAX_DIGITS = len(str(INT64_MAX))


def unit_terminal(unit: Unit) -> str:
    """Name of the lark terminal that lexes ``unit``."""
    return f"UNIT_{unit.name}"


UNIT_TERMINALS: frozenset[str] = frozenset(unit_terminal(unit) for unit in Unit)


def build_grammar() -> str:
    # The basic lexer tries wider terminals first, so "MS" beats "M".
    terminals = []
    for unit, spellings in UNIT_SPELLINGS.items():
        ordered = sorted(spellings, key=len, reverse=True)
        alternatives = " | ".join(f'"{spelling}"' for spelling in ordered)
        terminals.append(f"{unit_terminal(unit)}: {alternatives}")
    return _GRAMMAR_TEMPLATE % {
        "unit_alternatives": " | ".join(unit_terminal(unit) for unit in Unit),
        "unit_terminals": "\n".join(terminals),
    }


GRAMMAR = build_grammar()

parser = Lark(
    GRAMMAR,
    start=[START_SEQUENCE, START_TERM, START_UNIT],
    parser="lalr",
    lexer="basic",
)


def to_int64(token: Token, offset: int = 0) -> int:
    """Convert a DIGITS token, rejecting values above the signed 64-bit range."""
    digits = str(token).lstrip("0")
    position = offset + (token.start_pos or 0)
    if len(digits) > _INT64_MAX_DIGITS or (digits and int(digits) > INT64_MAX):
        raise NumberError(
            ERR_MSG_NUMBER_TOO_LARGE,
            f"digit run {str(token)!r} at offset {position} exceeds {INT64_MAX}",
            position=position,
        )
    return int(digits) if digits else 0


class TermBuilder(Interpreter):
    """Lark Interpreter that turns a parse tree into units and terms.

    ``offset`` is added to token positions so errors point into the
    caller's original text rather than the scanned slice.
    """

    def __init__(self, offset: int = 0) -> None:
        self._offset = offset

    def term(self, tree: Tree) -> Term:
        digits, unit = tree.children
        return Term(to_int64(digits, self._offset), self.visit(unit))

    def unit(self, tree: Tree) -> Unit:
        (token,) = tree.children
        return Unit.from_spelling(str(token))
