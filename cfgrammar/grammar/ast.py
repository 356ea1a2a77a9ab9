# cfgrammar/grammar/ast.py
"""Grammar 데이터 모델
- DerivationString: 우변 1개(심볼 시퀀스). ε는 저장하지 않는다.
- ProductionRule : 한 비단말의 대안(alt) 목록, 삽입 순서 유지
- Grammar        : 식별자 -> ProductionRule, 삽입 순서 유지(직렬화 결과 고정)
"""

from __future__     import annotations
from typing         import Callable, Dict, Iterator, List, Optional, Tuple, TypeVar, Union
from .symbols       import (
    Dialect, UTF8, EPSILON, Variable, Terminal, SymbolOrVariable, as_symbol,
)

T = TypeVar("T")


class DerivationString:
    """
    우변 1개. 심볼을 뒤에 붙이기만 한다(append-only).
    - ε 단말을 넣으면 조용히 버린다 → 빈 시퀀스가 곧 ε 생성규칙
    - epsilon 값은 방언 설정일 뿐 동등성 비교에는 쓰지 않는다
    """

    __slots__ = ("_symbols", "_epsilon")

    def __init__(self, symbols=(), epsilon: str = EPSILON):
        self._symbols: List[SymbolOrVariable] = []
        self._epsilon = epsilon
        for s in symbols:
            self.add_symbol(s)

    @property
    def epsilon(self) -> str:
        return self._epsilon

    @property
    def symbols(self) -> Tuple[SymbolOrVariable, ...]:
        return tuple(self._symbols)

    def add_symbol(self, symbol: Union[SymbolOrVariable, Variable, Terminal]) -> None:
        sym = as_symbol(symbol)
        term = sym.get_terminal()
        if term is not None and term.is_epsilon(self._epsilon):
            return
        self._symbols.append(sym)

    def is_empty(self) -> bool:
        return not self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[SymbolOrVariable]:
        return iter(self._symbols)

    def __getitem__(self, i: int) -> SymbolOrVariable:
        return self._symbols[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, DerivationString):
            return NotImplemented
        return self._symbols == other._symbols

    __hash__ = None

    def __repr__(self) -> str:
        return f"DerivationString({self._symbols!r})"


class ProductionRule:
    """
    한 비단말의 대안 목록.
    - add_derivation()은 무조건 뒤에 붙인다(빈 대안 허용, 중복 제거 없음)
    - 대안 0개와 '빈 대안 1개'는 서로 다른 값이지만 직렬화 결과는 같다(ε)
    """

    __slots__ = ("_derivations",)

    def __init__(self, derivations=()):
        self._derivations: List[DerivationString] = []
        for d in derivations:
            self.add_derivation(d)

    @property
    def derivations(self) -> Tuple[DerivationString, ...]:
        return tuple(self._derivations)

    def add_derivation(self, derivation: DerivationString) -> None:
        if not isinstance(derivation, DerivationString):
            raise TypeError(f"ProductionRule expects DerivationString, got {type(derivation).__name__}")
        self._derivations.append(derivation)

    def __len__(self) -> int:
        return len(self._derivations)

    def __iter__(self) -> Iterator[DerivationString]:
        return iter(self._derivations)

    def __getitem__(self, i: int) -> DerivationString:
        return self._derivations[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ProductionRule):
            return NotImplemented
        return self._derivations == other._derivations

    __hash__ = None

    def __repr__(self) -> str:
        return f"ProductionRule({self._derivations!r})"


class Grammar:
    """
    Grammar
    =======
    비단말 식별자 -> ProductionRule 매핑.

    - dict의 삽입 순서를 그대로 직렬화 순서로 쓴다. 같은 식별자로 다시
      add_rule() 하면 규칙만 교체되고 위치는 처음 삽입된 자리 그대로다.
    - 유도식 안에서 참조한 비단말에 규칙이 없어도 된다(닫힘 검사는 호출자 몫).
    """

    def __init__(self, dialect: Dialect = UTF8):
        self.dialect = dialect
        self._rules: Dict[str, ProductionRule] = {}

    @property
    def epsilon(self) -> str:
        return self.dialect.epsilon

    # ----- 변경 -----
    def add_rule(self, identifier: str, rule: ProductionRule) -> None:
        """
        upsert: 같은 식별자의 기존 규칙은 교체된다(last-write-wins).
        - 모든 대안의 epsilon이 이 문법 방언의 ε와 같아야 한다(아니면 ValueError).
          다른 ε로 걸러진 대안은 이 문법의 ε를 품고 있거나 정상 단말을 잃었을 수 있다.
        """
        for i, d in enumerate(rule):
            if d.epsilon != self.dialect.epsilon:
                raise ValueError(
                    f"Derivation {i} of rule <{identifier}> uses epsilon {d.epsilon!r}, "
                    f"grammar dialect {self.dialect.name!r} uses {self.dialect.epsilon!r}; "
                    f"build it with Grammar.new_derivation()"
                )
        self._rules[identifier] = rule

    def new_derivation(self, symbols=()) -> DerivationString:
        """이 문법의 ε 설정을 따르는 빈(또는 초기화된) DerivationString."""
        return DerivationString(symbols, epsilon=self.dialect.epsilon)

    # ----- 조회 -----
    def get_rule(self, identifier: str) -> Optional[ProductionRule]:
        return self._rules.get(identifier)

    def items(self) -> Iterator[Tuple[str, ProductionRule]]:
        return iter(self._rules.items())

    def __contains__(self, identifier) -> bool:
        return identifier in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grammar):
            return NotImplemented
        return self.dialect == other.dialect and self._rules == other._rules

    __hash__ = None

    # ----- 직렬화 -----
    def grammar_to_text(self) -> str:
        from ..codegen.emit_text import emit_text_to_string
        return emit_text_to_string(self)

    def grammar_to_stringlike(self, factory: Callable[[str], T]) -> T:
        """정규 텍스트를 factory로 감싸 돌려준다. 예: list → 코드포인트 리스트."""
        return factory(self.grammar_to_text())

    def __str__(self) -> str:
        return self.grammar_to_text()

    def __repr__(self) -> str:
        return f"Grammar(dialect={self.dialect.name!r}, rules={self._rules!r})"
