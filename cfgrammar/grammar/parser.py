"""cfgrammar 문법 텍스트 빌더
- 규칙: <Ident> -> alt | alt | ...   (한 줄에 규칙 하나, 개행으로 종료)
- 변수: <...>  (다음 '>'까지 전부 식별자)
- 단말: 그 밖의 코드포인트 **1개** ('abc'는 단말 3개)
- 공백: 스페이스/탭만. 개행은 구조 토큰이다
- ε 코드포인트는 DerivationString이 버린다

토큰화 없이 코드포인트 커서 위에서 바로 재귀 하강한다.
오류가 나면 전체 빌드를 중단한다(부분 결과/복구/위치 정보 없음).
"""

from __future__ import annotations
import regex as re
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from .ast import *
from .symbols import Dialect, UTF8, Variable, Terminal, SymbolOrVariable


_WS_RE    = re.compile(r"[ \t]*")
_BLANK_RE = re.compile(r"[ \t\n]*")
_VAR_RE   = re.compile(r"<([^>]*)>")


class ParseErrorKind(Enum):
    IMPLICATION = "could not consume implication"
    SYMBOL      = "could not consume next var or terminal"


class GrammarSyntaxError(SyntaxError):
    """빌드 실패. 메시지는 kind마다 고정된 문장이다."""

    def __init__(self, kind: ParseErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass
class BuildResult:
    """
    try_build()의 반환값.
    - 성공: grammar가 채워지고 error는 None
    - 실패: grammar는 None, error에 원인(kind 포함)
    """
    grammar: Optional[Grammar] = None
    error: Optional[GrammarSyntaxError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Grammar:
        if self.error is not None:
            raise self.error
        return self.grammar


# --- 커서 ---
class _Cursor:
    def __init__(self, src: str):
        self.src = src
        self.i = 0

    def peek(self, k: int = 0) -> Optional[str]:
        j = self.i + k
        if 0 <= j < len(self.src):
            return self.src[j]
        return None

    def advance(self, n: int = 1) -> None:
        self.i = min(self.i + n, len(self.src))

    def at_end(self) -> bool:
        return self.i >= len(self.src)

    def match(self, lit: str) -> bool:
        if self.src.startswith(lit, self.i):
            self.advance(len(lit))
            return True
        return False

    def skip(self, pattern) -> None:
        self.i = pattern.match(self.src, self.i).end()


class _State:
    RULE_START   = "expect-rule-start"
    ARROW        = "expect-arrow"
    IN_ALT       = "in-alternative"
    AFTER_SYMBOL = "after-symbol"


class GrammarBuilder:
    """
    GrammarBuilder
    ==============
    텍스트 → Grammar. 상태 4개짜리 기계로 동작한다.

      expect-rule-start --'<'ident'>'--> expect-arrow --'->'--> in-alternative
      in-alternative    --symbol-->      after-symbol --'|'?--> in-alternative
      in-alternative    --'\\n'|EOF-->   expect-rule-start (규칙 저장)

    규칙 시작 위치에서 '<'가 아니면(EOF 포함) 거기까지 만든 Grammar로 끝난다.
    """

    def __init__(self, text: str, dialect: Dialect = UTF8):
        self.text = text
        self.dialect = dialect

    def build(self) -> Grammar:
        cur = _Cursor(self.text)
        g = Grammar(self.dialect)

        state = _State.RULE_START
        ident: str = ""
        rule = ProductionRule()
        alt = g.new_derivation()

        while True:
            if state == _State.RULE_START:
                cur.skip(_BLANK_RE)
                if cur.peek() != "<":
                    return g
                ident = _read_variable(cur).identifier
                state = _State.ARROW

            elif state == _State.ARROW:
                cur.skip(_WS_RE)
                if not cur.match("->"):
                    raise GrammarSyntaxError(ParseErrorKind.IMPLICATION)
                rule = ProductionRule()
                alt = g.new_derivation()
                state = _State.IN_ALT

            elif state == _State.IN_ALT:
                cur.skip(_WS_RE)
                ch = cur.peek()
                if ch is None or ch == "\n":
                    cur.match("\n")
                    rule.add_derivation(alt)
                    g.add_rule(ident, rule)
                    state = _State.RULE_START
                elif ch == "|":
                    # 빈 대안: 심볼 없이 바로 구분자
                    state = _State.AFTER_SYMBOL
                else:
                    alt.add_symbol(_read_symbol(cur))
                    state = _State.AFTER_SYMBOL

            elif state == _State.AFTER_SYMBOL:
                cur.skip(_WS_RE)
                if cur.match("|"):
                    rule.add_derivation(alt)
                    alt = g.new_derivation()
                state = _State.IN_ALT

    def try_build(self) -> BuildResult:
        try:
            return BuildResult(grammar=self.build())
        except GrammarSyntaxError as e:
            return BuildResult(error=e)


def _read_variable(cur: _Cursor) -> Variable:
    """'<' ... '>' 를 소비. 닫는 '>'가 없으면 SYMBOL 오류."""
    m = _VAR_RE.match(cur.src, cur.i)
    if m is None:
        raise GrammarSyntaxError(ParseErrorKind.SYMBOL)
    cur.i = m.end()
    return Variable(m.group(1))


def _read_symbol(cur: _Cursor) -> SymbolOrVariable:
    ch = cur.peek()
    if ch is None:
        raise GrammarSyntaxError(ParseErrorKind.SYMBOL)
    if ch == "<":
        return SymbolOrVariable(_read_variable(cur))
    cur.advance()
    return SymbolOrVariable(Terminal(ch))


# --- 공개 헬퍼 ---
def parse_grammar(src: str, dialect: Dialect = UTF8) -> Grammar:
    return GrammarBuilder(src, dialect).build()
