# cfgrammar/codegen/emit_text.py
"""Grammar → 정규 텍스트.

출력 형식
---------
    G = {
    	<A> -> a <B> | b
    	<B> -> ε
    }

- 규칙마다 개행 + 탭 + <식별자> + ' -> ' + 대안들(' | ' 구분)
- 대안 안의 심볼은 공백 하나로 구분, 단말은 코드포인트 그대로, 변수는 <이름>
- 빈 대안과 대안 0개 규칙은 해당 방언의 ε 하나로 출력
- 규칙 순서 = Grammar 삽입 순서 (같은 입력이면 항상 같은 출력)
"""

from __future__ import annotations
from typing import TYPE_CHECKING
from ..grammar.symbols import EPSILON, SymbolOrVariable

if TYPE_CHECKING:
    from ..grammar.ast import DerivationString, Grammar, ProductionRule


def _fmt_symbol(s: SymbolOrVariable) -> str:
    if s.is_variable():
        return f"<{s.get_variable_unsafe().identifier}>"
    return s.get_terminal_unsafe().symbol


def emit_derivation(d: "DerivationString", epsilon: str = EPSILON) -> str:
    if d.is_empty():
        return epsilon
    return " ".join(_fmt_symbol(s) for s in d)


def emit_rule(identifier: str, rule: "ProductionRule", epsilon: str = EPSILON) -> str:
    if len(rule) == 0:
        rhs = epsilon
    else:
        rhs = " | ".join(emit_derivation(d, epsilon) for d in rule)
    return f"<{identifier}> -> {rhs}"


def emit_text_to_string(g: "Grammar", name: str = "G") -> str:
    out = [f"{name} = {{"]
    for ident, rule in g.items():
        out.append("\n\t" + emit_rule(ident, rule, g.epsilon))
    out.append("\n}")
    return "".join(out)
