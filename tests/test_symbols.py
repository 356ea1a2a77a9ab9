import pytest

from cfgrammar.grammar.symbols import (
    ASCII, EPSILON, UTF8, Alphabet, Dialect, SymbolOrVariable, Terminal, Variable,
)


def test_default_is_epsilon_terminal():
    s = SymbolOrVariable()
    assert s.is_terminal()
    assert not s.is_variable()
    assert s.get_terminal() == Terminal(EPSILON)


def test_variant_accessors():
    v = SymbolOrVariable(Variable("Expr"))
    assert v.is_variable()
    assert v.get_variable() == Variable("Expr")
    assert v.get_terminal() is None
    assert v.get_variable_unsafe().identifier == "Expr"

    t = SymbolOrVariable(Terminal("+"))
    assert t.is_terminal()
    assert t.get_variable() is None
    assert t.get_terminal_unsafe().symbol == "+"


def test_unsafe_accessor_on_wrong_variant_raises():
    with pytest.raises(TypeError):
        SymbolOrVariable(Terminal("a")).get_variable_unsafe()
    with pytest.raises(TypeError):
        SymbolOrVariable(Variable("A")).get_terminal_unsafe()


def test_no_implicit_conversion():
    with pytest.raises(TypeError):
        SymbolOrVariable("a")


def test_variant_disjointness():
    assert SymbolOrVariable(Variable("X")) != SymbolOrVariable(Terminal("X"))
    assert SymbolOrVariable(Variable("X")) != Terminal("X")
    assert SymbolOrVariable(Terminal("X")) != Variable("X")


def test_equality_against_bare_payloads():
    v = SymbolOrVariable(Variable("A"))
    assert v == Variable("A")
    assert Variable("A") == v
    assert v != Variable("B")
    t = SymbolOrVariable(Terminal("a"))
    assert t == Terminal("a")
    assert Terminal("a") == t
    assert hash(t) == hash(Terminal("a"))


def test_symbols_usable_as_set_members():
    pool = {SymbolOrVariable(Variable("A")), SymbolOrVariable(Terminal("A")), SymbolOrVariable(Variable("A"))}
    assert len(pool) == 2


@pytest.mark.parametrize("bad", ["", "ab", "xyz"])
def test_terminal_is_one_code_point(bad):
    with pytest.raises(ValueError):
        Terminal(bad)


def test_terminal_epsilon_depends_on_dialect():
    assert Terminal("ε").is_epsilon()
    assert not Terminal("ε").is_epsilon(ASCII.epsilon)
    assert Terminal("\f").is_epsilon(ASCII.epsilon)


@pytest.mark.parametrize("name, expected", [("utf8", UTF8), ("ASCII", ASCII), (" utf8 ", UTF8)])
def test_dialect_by_name(name, expected):
    assert Dialect.by_name(name) is expected


def test_dialect_by_name_unknown():
    with pytest.raises(ValueError):
        Dialect.by_name("latin1")


def test_alphabet_membership():
    ab = Alphabet([Terminal("a"), Terminal("b")])
    assert ab.is_in_alphabet(Terminal("a"))
    assert ab.is_in_alphabet("b")
    assert not ab.is_in_alphabet("c")
    assert not ab.is_in_alphabet("ab")
    assert "a" in ab
    assert Variable("a") not in ab
    assert len(ab) == 2


def test_alphabet_from_symbols():
    ab = Alphabet.from_symbols("xyx")
    assert len(ab) == 2
    assert [t.symbol for t in ab] == ["x", "y"]


def test_value_exposes_payload():
    assert SymbolOrVariable(Variable("A")).value == Variable("A")
    assert SymbolOrVariable(Terminal("a")).value is not None
    assert isinstance(SymbolOrVariable(Terminal("a")).value, Terminal)
    assert SymbolOrVariable().value == Terminal(EPSILON)


def test_alphabet_accepts_wrapped_symbols():
    ab = Alphabet.from_symbols("ab")
    assert SymbolOrVariable(Terminal("a")) in ab
    assert ab.is_in_alphabet(SymbolOrVariable(Terminal("b")))
    assert SymbolOrVariable(Terminal("c")) not in ab
    assert SymbolOrVariable(Variable("a")) not in ab
