import copy

import pytest

from punctum.custom import CustomPunctuation, custom_punctuation
from punctum.lexer import TokenLocation, TokenType, tokenize_string
from punctum.parser import ParseError, ParseStream, parse_str
from punctum.printer import TokenStream
from punctum.punct import DecompositionMode, decompose
from punctum.punct.errors import (
    EmptyPunctuationSymbolError,
    InvalidPunctuationNameError,
    UnexpectedPunctuationError,
)

LeftRightArrow = custom_punctuation("LeftRightArrow", "<=>")
DefinedAs = custom_punctuation("DefinedAs", "::=")
DoubleAt = custom_punctuation("DoubleAt", "@@")


def test_declaration_shape() -> None:
    assert LeftRightArrow.__name__ == "LeftRightArrow"
    assert issubclass(LeftRightArrow, CustomPunctuation)
    assert LeftRightArrow.SYMBOL == "<=>"
    assert [atom.text for atom in LeftRightArrow.ATOMS] == ["<=", ">"]
    assert LeftRightArrow.LENGTH == 2


@pytest.mark.parametrize("symbol", ["<=>", "::=", "@@", "</>", "<<=", "...", "->>", "|=>"])
def test_declaration_length_matches_decomposition(symbol: str) -> None:
    punctuation = custom_punctuation("Punctuation", symbol)

    assert punctuation.LENGTH == decompose(symbol, DecompositionMode.STRICT)
    assert punctuation.LENGTH == decompose(symbol, DecompositionMode.LENIENT)
    assert len(punctuation().locations) == punctuation.LENGTH


def test_declaration_rejects_unknown_character() -> None:
    with pytest.raises(UnexpectedPunctuationError):
        custom_punctuation("Dollar", "$")
    with pytest.raises(UnexpectedPunctuationError):
        custom_punctuation("ArrowDollar", "->$")


def test_declaration_rejects_empty_symbol() -> None:
    with pytest.raises(EmptyPunctuationSymbolError):
        custom_punctuation("Nothing", "")


def test_declaration_rejects_invalid_name() -> None:
    with pytest.raises(InvalidPunctuationNameError):
        custom_punctuation("left-right", "<=>")


def test_peek_does_not_advance() -> None:
    stream = ParseStream(tokenize_string("::= rest"))

    assert stream.peek(DefinedAs)
    assert stream.peek(DefinedAs)
    assert DefinedAs.peek(stream.cursor())
    assert stream.cursor().position == 0

    defined_as = stream.parse(DefinedAs)
    assert isinstance(defined_as, DefinedAs)
    assert len(defined_as.locations) == 2
    assert stream.peek_token().text == "rest"
    assert defined_as.to_source() == "::="


def test_parse_leaves_rest_unconsumed() -> None:
    stream = ParseStream(tokenize_string("@@x"))
    double_at = stream.parse(DoubleAt)

    assert [location.col_number for location in double_at.locations] == [0, 1]
    assert stream.peek(TokenType.IDENTIFIER)
    assert stream.peek_token().text == "x"


def test_parse_mismatch() -> None:
    stream = ParseStream(tokenize_string("<= >"))

    assert not stream.peek(LeftRightArrow)
    with pytest.raises(ParseError) as e:
        stream.parse(LeftRightArrow)
    assert e.value.message == "expected `<=>`"
    assert stream.cursor().position == 0


def test_display() -> None:
    assert LeftRightArrow.display() == "`<=>`"


def test_print_then_parse() -> None:
    arrow = parse_str("<=>", LeftRightArrow)
    assert [location.col_number for location in arrow.locations] == [0, 2]

    tokens = TokenStream()
    arrow.to_tokens(tokens)
    assert tokens.to_source() == "<=>"

    reparsed = parse_str(tokens.to_source(), LeftRightArrow)
    assert isinstance(reparsed, LeftRightArrow)
    assert len(reparsed.locations) == LeftRightArrow.LENGTH
    assert reparsed == arrow


def test_print_within_other_tokens() -> None:
    tokens = TokenStream(tokenize_string("a")[:-1])
    tokens.extend(LeftRightArrow(), DefinedAs())
    assert tokens.to_source() == "a <=> ::="


def test_construction_from_single_location() -> None:
    location = TokenLocation(line_number=3, col_number=7, source="string")
    arrow = LeftRightArrow(location)

    assert arrow.locations == (location, location)
    assert arrow.location == location


def test_construction_from_locations() -> None:
    first = TokenLocation(line_number=0, col_number=0, source="string")
    second = first.shift_col_number(2)

    assert LeftRightArrow([first, second]).locations == (first, second)
    with pytest.raises(ValueError, match="exactly 2 locations"):
        LeftRightArrow([first])
    with pytest.raises(TypeError):
        LeftRightArrow(42)  # type: ignore[arg-type]


def test_default_construction() -> None:
    arrow = LeftRightArrow()

    assert arrow.locations == (TokenLocation.toolchain(),) * 2
    assert arrow == parse_str("<=>", LeftRightArrow)
    assert arrow.clone() == arrow
    assert hash(arrow) == hash(parse_str("<=>", LeftRightArrow))
    assert repr(arrow) == "<=>"
    assert arrow.to_source() == "<=>"


def test_equality_ignores_locations() -> None:
    somewhere = LeftRightArrow(TokenLocation(line_number=10, col_number=2, source="string"))

    assert somewhere == LeftRightArrow()
    assert len({somewhere, LeftRightArrow(), parse_str("<=>", LeftRightArrow)}) == 1


def test_equality_between_different_punctuation() -> None:
    also_arrow = custom_punctuation("LeftRightArrow", "<=>")

    assert LeftRightArrow() != DefinedAs()
    assert LeftRightArrow() != also_arrow()
    assert LeftRightArrow() != "<=>"


def test_clone_keeps_locations() -> None:
    location = TokenLocation(line_number=1, col_number=1, source="string")
    arrow = LeftRightArrow(location)

    for cloned in (arrow.clone(), copy.copy(arrow), copy.deepcopy(arrow)):
        assert cloned is not arrow
        assert type(cloned) is LeftRightArrow
        assert cloned.locations == arrow.locations


def test_instances_are_immutable() -> None:
    arrow = LeftRightArrow()
    with pytest.raises(AttributeError):
        arrow.locations = ()  # type: ignore[misc]
    with pytest.raises(AttributeError):
        arrow._locations = ()  # type: ignore[misc]
    with pytest.raises(AttributeError):
        arrow.anything = 1  # type: ignore[attr-defined]


def test_declaration_module_is_declaring_module() -> None:
    assert LeftRightArrow.__module__ == __name__
    assert custom_punctuation("Arrow", "->", module="grammar.punct").__module__ == "grammar.punct"


def test_construction_rejects_non_locations() -> None:
    with pytest.raises(TypeError):
        LeftRightArrow("ab")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        LeftRightArrow([TokenLocation.toolchain(), "b"])  # type: ignore[list-item]
