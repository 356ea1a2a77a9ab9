"""cfgrammar – context-free grammars in memory, from and to a compact text notation.

    >>> from cfgrammar import parse_grammar
    >>> g = parse_grammar("<A> -> a <B> | b\\n<B> -> c")
    >>> print(g.grammar_to_text())
    G = {
    	<A> -> a <B> | b
    	<B> -> c
    }
"""

from .grammar import (
    Dialect, UTF8, ASCII, EPSILON,
    Variable, Terminal, SymbolOrVariable, Alphabet,
    DerivationString, ProductionRule, Grammar,
    GrammarBuilder, GrammarSyntaxError, ParseErrorKind, BuildResult, parse_grammar,
    load_grammar_text, load_grammar,
)
from .codegen import emit_text_to_string

__version__ = "0.1.0"
