"""문법 파일 로더 (.cfg / .g 등 확장자 무관)"""

from __future__ import annotations
import regex as re
from pathlib    import Path
from .ast       import Grammar
from .parser    import GrammarBuilder
from .symbols   import Dialect, UTF8

_NEWLINE_RE = re.compile(r"\r\n?")


def load_grammar_text(path: str, encoding: str = "utf-8") -> str:
    """
    파일을 읽어 빌더가 바로 먹을 수 있는 텍스트로 만든다.
    - 선두 BOM 제거
    - CRLF / CR → LF
    """
    text = Path(path).read_text(encoding=encoding)
    if text.startswith("\ufeff"):
        text = text[1:]
    return _NEWLINE_RE.sub("\n", text)


def load_grammar(path: str, dialect: Dialect = UTF8, encoding: str = "utf-8") -> Grammar:
    return GrammarBuilder(load_grammar_text(path, encoding), dialect).build()
