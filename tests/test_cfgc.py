import io

from cfgrammar import cfgc


def test_check_ok(sample_path, capsys):
    assert cfgc.main(["check", str(sample_path)]) == 0
    out = capsys.readouterr().out
    assert "[CHECK OK] rules=3 alternatives=5" in out


def test_check_syntax_error(tmp_path, capsys):
    p = tmp_path / "bad.cfg"
    p.write_text("<A> -> <B\n", encoding="utf-8")
    assert cfgc.main(["check", str(p)]) == 2
    err = capsys.readouterr().err
    assert "[SYNTAX ERROR]" in err
    assert "could not consume next var or terminal" in err


def test_check_missing_file(tmp_path, capsys):
    assert cfgc.main(["check", str(tmp_path / "nope.cfg")]) == 2
    assert "[ERROR] FileNotFoundError" in capsys.readouterr().err


def test_fmt_stdout(sample_path, capsys):
    assert cfgc.main(["fmt", str(sample_path)]) == 0
    out = capsys.readouterr().out
    assert out == "G = {\n\t<S> -> a <S> b | ε\n\t<T> -> x | y z\n\t<U> -> <S> <T>\n}\n"


def test_fmt_to_file(sample_path, tmp_path, capsys):
    out_path = tmp_path / "out" / "sample.cfg"
    assert cfgc.main(["fmt", str(sample_path), "-o", str(out_path)]) == 0
    assert out_path.read_text(encoding="utf-8").startswith("G = {\n\t<S> -> ")
    assert "[EMIT] rules=3" in capsys.readouterr().out


def test_fmt_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("<A> -> \f | b\r\n"))
    assert cfgc.main(["fmt", "-", "--dialect", "ascii"]) == 0
    assert capsys.readouterr().out == "G = {\n\t<A> -> \f | b\n}\n"


def test_debug_goes_to_stderr(sample_path, capsys):
    assert cfgc.main(["check", str(sample_path), "-D"]) == 0
    captured = capsys.readouterr()
    assert "[DEBUG] Grammar built | rules=3" in captured.err
    assert "[DEBUG]" not in captured.out


def test_demo(capsys):
    assert cfgc.main(["demo"]) == 0
    assert capsys.readouterr().out == (
        "G = {\n"
        "\t<A> -> <Q> | s | ε\n"
        "\t<B> -> h <A> g k l l l l l | e | g g l l l <C>\n"
        "\t<C> -> ε | <B> | <A>\n"
        "}\n"
    )
