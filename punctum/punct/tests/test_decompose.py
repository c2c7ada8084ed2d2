import pytest

from punctum.punct import (
    ATOM_TABLE,
    DecompositionMode,
    decompose,
    decompose_atoms,
    lookup_atom,
    symbol_length,
)
from punctum.punct.errors import (
    EmptyPunctuationSymbolError,
    PunctuationDeclarationError,
    UnexpectedPunctuationError,
)


def test_atom_table_lengths() -> None:
    assert all(len(text) == atom.length for text, atom in ATOM_TABLE.items())
    assert {atom.length for atom in ATOM_TABLE.values()} == {1, 2, 3}


def test_atom_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        ATOM_TABLE["$"] = ATOM_TABLE["+"]  # type: ignore[index]


def test_lookup_atom() -> None:
    atom = lookup_atom("<<=")
    assert atom is not None
    assert atom.length == 3
    assert lookup_atom("<=>") is None
    assert lookup_atom("$") is None


@pytest.mark.parametrize(
    ("symbol", "atoms"),
    [
        ("<=>", ("<=", ">")),
        ("::=", ("::", "=")),
        ("@@", ("@", "@")),
        ("</>", ("<", "/", ">")),
        ("<<=", ("<<=",)),
        ("...=", ("...", "=")),
        ("->>", ("->", ">")),
        ("+", ("+",)),
    ],
)
def test_decompose_longest_match(symbol: str, atoms: tuple[str, ...]) -> None:
    assert tuple(atom.text for atom in decompose_atoms(symbol)) == atoms
    assert decompose(symbol, DecompositionMode.STRICT) == len(atoms)
    assert decompose(symbol, DecompositionMode.LENIENT) == len(atoms)


def test_decompose_modes_agree_on_every_pair_of_atoms() -> None:
    for head in ATOM_TABLE:
        for tail in ATOM_TABLE:
            symbol = head + tail
            strict = decompose(symbol, DecompositionMode.STRICT)
            assert strict == decompose(symbol, DecompositionMode.LENIENT)
            assert symbol_length(symbol) == len(symbol)


def test_decompose_strict_unexpected_character() -> None:
    with pytest.raises(UnexpectedPunctuationError) as e:
        decompose("<$>", DecompositionMode.STRICT)

    assert e.value.position == 1
    assert e.value.unexpected == "$"
    assert e.value.remainder == "$>"
    assert "[unexpected-punctuation-error]" in repr(e.value)


def test_decompose_strict_rejects_whitespace() -> None:
    with pytest.raises(PunctuationDeclarationError):
        decompose("< =", DecompositionMode.STRICT)


def test_decompose_lenient_skips_unknown_character() -> None:
    assert decompose("<$>", DecompositionMode.LENIENT) == 2
    assert decompose("$", DecompositionMode.LENIENT) == 0
    assert symbol_length("<$>") == 2


def test_decompose_empty_symbol() -> None:
    with pytest.raises(EmptyPunctuationSymbolError):
        decompose("", DecompositionMode.STRICT)
    assert decompose("", DecompositionMode.LENIENT) == 0
