"""Grammar data model, text builder and loader."""

from .symbols import (
    Dialect, UTF8, ASCII, EPSILON,
    Variable, Terminal, SymbolOrVariable, Alphabet,
)
from .ast import DerivationString, ProductionRule, Grammar
from .parser import (
    GrammarBuilder, GrammarSyntaxError, ParseErrorKind, BuildResult, parse_grammar,
)
from .loader import load_grammar_text, load_grammar
