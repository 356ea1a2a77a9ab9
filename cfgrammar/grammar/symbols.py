# cfgrammar/grammar/symbols.py
"""문법 심볼 모델
- Dialect: ε(epsilon)로 쓰일 코드포인트 선택 (UTF-8: 'ε', ASCII: '\\f')
- Variable: 비단말 이름
- Terminal: 단일 코드포인트 단말
- SymbolOrVariable: Variable | Terminal 둘 중 하나만 담는 합 타입
- Alphabet: 단말 집합 소속 판정기
"""

from __future__     import annotations
from dataclasses    import dataclass
from typing         import Iterable, Iterator, FrozenSet, Optional, Union


@dataclass(frozen=True)
class Dialect:
    """
    문법 텍스트 방언.
    - name   : 'utf8' | 'ascii'
    - epsilon: 빈 문자열을 뜻하는 예약 코드포인트
    """
    name: str
    epsilon: str

    @classmethod
    def by_name(cls, name: str) -> "Dialect":
        key = name.strip().lower()
        for d in (UTF8, ASCII):
            if d.name == key:
                return d
        raise ValueError(f"Unknown dialect: {name!r} (expected 'utf8' or 'ascii')")


UTF8  = Dialect("utf8", "ε")
ASCII = Dialect("ascii", "\f")

EPSILON = UTF8.epsilon


@dataclass(frozen=True)
class Variable:
    """비단말. 동일성은 identifier 문자열로만 판단한다."""
    identifier: str


@dataclass(frozen=True)
class Terminal:
    """단말 1개 = 코드포인트 1개."""
    symbol: str

    def __post_init__(self):
        if not isinstance(self.symbol, str) or len(self.symbol) != 1:
            raise ValueError(f"Terminal must be exactly one code point, got {self.symbol!r}")

    def is_epsilon(self, epsilon: str = EPSILON) -> bool:
        return self.symbol == epsilon


SymbolKind = Union[Variable, Terminal]


class SymbolOrVariable:
    """
    SymbolOrVariable
    ================
    Variable 또는 Terminal 중 **정확히 하나**를 담는 값.

    - 인자 없이 만들면 ε 단말(Terminal(EPSILON))이 된다. 자리표시용이며
      DerivationString에는 절대 들어가지 않는다.
    - 두 변형 사이의 암묵 변환은 없다. str 등을 넘기면 TypeError.
    - Variable 쪽과 Terminal 쪽은 payload 글자가 같아도 항상 다르다.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Optional[SymbolKind] = None):
        if value is None:
            value = Terminal(EPSILON)
        if not isinstance(value, (Variable, Terminal)):
            raise TypeError(f"SymbolOrVariable expects Variable or Terminal, got {type(value).__name__}")
        self._value = value

    @property
    def value(self) -> SymbolKind:
        return self._value

    def is_variable(self) -> bool:
        return isinstance(self._value, Variable)

    def is_terminal(self) -> bool:
        return isinstance(self._value, Terminal)

    def get_variable(self) -> Optional[Variable]:
        return self._value if isinstance(self._value, Variable) else None

    def get_terminal(self) -> Optional[Terminal]:
        return self._value if isinstance(self._value, Terminal) else None

    def get_variable_unsafe(self) -> Variable:
        """is_variable()로 확인한 뒤에만 호출할 것."""
        if not isinstance(self._value, Variable):
            raise TypeError("get_variable_unsafe() called on a terminal")
        return self._value

    def get_terminal_unsafe(self) -> Terminal:
        """is_terminal()로 확인한 뒤에만 호출할 것."""
        if not isinstance(self._value, Terminal):
            raise TypeError("get_terminal_unsafe() called on a variable")
        return self._value

    def __eq__(self, other) -> bool:
        if isinstance(other, SymbolOrVariable):
            other = other._value
        if isinstance(other, (Variable, Terminal)):
            # dataclass eq는 클래스가 다르면 False
            return type(self._value) is type(other) and self._value == other
        return NotImplemented

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"SymbolOrVariable({self._value!r})"


def as_symbol(x: Union[SymbolOrVariable, Variable, Terminal]) -> SymbolOrVariable:
    if isinstance(x, SymbolOrVariable):
        return x
    return SymbolOrVariable(x)


class Alphabet:
    """단말 집합. is_in_alphabet()만 제공하는 단순 판정기."""

    def __init__(self, terminals: Iterable[Terminal] = ()):
        self._symbols: FrozenSet[Terminal] = frozenset(terminals)

    @classmethod
    def from_symbols(cls, symbols: Iterable[str]) -> "Alphabet":
        return cls(Terminal(s) for s in symbols)

    def is_in_alphabet(self, symbol: Union[SymbolOrVariable, Terminal, str]) -> bool:
        if isinstance(symbol, SymbolOrVariable):
            symbol = symbol.get_terminal()
            if symbol is None:
                return False
        if isinstance(symbol, str):
            if len(symbol) != 1:
                return False
            symbol = Terminal(symbol)
        return symbol in self._symbols

    def __contains__(self, symbol) -> bool:
        if isinstance(symbol, SymbolOrVariable):
            symbol = symbol.get_terminal()
        if not isinstance(symbol, (Terminal, str)):
            return False
        return self.is_in_alphabet(symbol)

    def __iter__(self) -> Iterator[Terminal]:
        return iter(sorted(self._symbols, key=lambda t: t.symbol))

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({''.join(t.symbol for t in self)!r})"
