# cfgrammar/cfgc.py
"""cfgc – cfgrammar CLI

사용 예)
    $ python -m cfgrammar.cfgc check tests/data/sample.cfg -D
    $ python -m cfgrammar.cfgc fmt tests/data/sample.cfg -o out/sample.cfg
    $ cat sample.cfg | python -m cfgrammar.cfgc fmt - --dialect ascii
    $ python -m cfgrammar.cfgc demo

기능
----
- check : 문법을 읽어 빌드가 되는지 확인하고 규칙/대안 수를 출력
- fmt   : 문법을 읽어 정규 텍스트(G = { ... })로 다시 출력
- demo  : 내장 예제 문법을 빌드해 출력

디버그 모드(-D/--debug)를 켜면 단계별 진행 상황과 Grammar repr을 stderr로 출력합니다.
"""

from __future__ import annotations
import argparse
import pathlib
import sys
from typing import Optional

DEMO_GRAMMAR = (
    "<A> -> ε <Q> | s | ε\n"
    "<B> -> h <A>gklllll | e | gglll <C>\n"
    "<C> -> ε | <B> | <A>"
)

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _read_source(path: str) -> str:
    """'-'이면 stdin, 아니면 파일(개행 정규화 포함)."""
    from .grammar.loader import load_grammar_text
    if path == "-":
        return sys.stdin.read().replace("\r\n", "\n").replace("\r", "\n")
    return load_grammar_text(path)

# ------------------------------
# 파이프라인 로딩
# ------------------------------

def _load_pipeline(src: str, debug: bool, dialect_name: str):
    """텍스트 → Grammar. 실패 시 GrammarSyntaxError(SyntaxError)가 그대로 올라간다."""
    from .grammar.symbols import Dialect
    from .grammar.parser import GrammarBuilder

    dialect = Dialect.by_name(dialect_name)
    if debug: _eprint("[DEBUG] source ready | chars=%d dialect=%s" % (len(src), dialect.name))

    g = GrammarBuilder(src, dialect).build()
    if debug: _eprint("[DEBUG] Grammar built | rules=%d alternatives=%d" %
                      (len(g), _count_alternatives(g)))
    return g


def _count_alternatives(g) -> int:
    return sum(len(rule) for _, rule in g.items())


def _print_grammar_repr(g) -> None:
    _eprint("\n[GRAMMAR]\n" + repr(g))

# ------------------------------
# 커맨드 구현
# ------------------------------

def cmd_check(args) -> int:
    try:
        g = _load_pipeline(_read_source(args.file), debug=args.debug, dialect_name=args.dialect)
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return 2
    except Exception as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    if args.debug:
        _print_grammar_repr(g)

    print(f"[CHECK OK] rules={len(g)} alternatives={_count_alternatives(g)}")
    return 0


def cmd_fmt(args) -> int:
    try:
        g = _load_pipeline(_read_source(args.file), debug=args.debug, dialect_name=args.dialect)
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return 2
    except Exception as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    from .codegen.emit_text import emit_text_to_string
    text = emit_text_to_string(g)

    if args.output is None:
        print(text)
        return 0

    out_path = pathlib.Path(args.output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text + "\n", encoding="utf-8")
    print(f"[EMIT] rules={len(g)} -> {out_path}")
    if args.debug:
        _eprint(f"[DEBUG] bytes={len(text.encode('utf-8'))}")
    return 0


def cmd_demo(args) -> int:
    """내장 예제 문법을 빌드해 정규 텍스트로 출력합니다."""
    g = _load_pipeline(DEMO_GRAMMAR, debug=args.debug, dialect_name="utf8")
    if args.debug:
        _print_grammar_repr(g)
    print(g.grammar_to_text())
    return 0


# ------------------------------
# 엔트리포인트
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="cfgc", description="cfgrammar context-free grammar CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="문법을 빌드해 오류 유무를 확인합니다")
    p_check.add_argument("file", help="문법 파일 ('-'이면 stdin)")
    p_check.add_argument("--dialect", choices=["utf8", "ascii"], default="utf8", help="ε 표기 방언")
    p_check.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_check.set_defaults(func=cmd_check)

    p_fmt = sub.add_parser("fmt", help="문법을 정규 텍스트로 다시 출력합니다")
    p_fmt.add_argument("file", help="문법 파일 ('-'이면 stdin)")
    p_fmt.add_argument("--dialect", choices=["utf8", "ascii"], default="utf8", help="ε 표기 방언")
    p_fmt.add_argument("-o", "--output", help="출력 파일 경로(미지정시 stdout)")
    p_fmt.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_fmt.set_defaults(func=cmd_fmt)

    p_demo = sub.add_parser("demo", help="내장 예제 문법을 출력합니다")
    p_demo.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_demo.set_defaults(func=cmd_demo)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
