from punctum.cli.output import cli_message
from punctum.cli.parser.arguments import CLIArguments
from punctum.custom import CustomPunctuation
from punctum.lexer import debug_lexer_wrapper, tokenize_from_raw
from punctum.parser import ParseError, ParseStream
from punctum.printer import TokenStream


def cli_check_declaration_against_input(
    args: CLIArguments,
    punctuation: type[CustomPunctuation],
) -> int:
    """Peek and parse punctuation at the beginning of an input text, returns exit code."""
    assert args.input_text is not None

    if not args.features.parsing:
        cli_message("ERROR", f"{punctuation.__name__} has no parsing, cannot check it against input")
        return 1

    tokenizer = tokenize_from_raw(source="string", lines=args.input_text.splitlines() or [""])
    if args.lexer_debug_emit_lexemes:
        tokenizer = debug_lexer_wrapper(tokenizer)
    stream = ParseStream(list(tokenizer))

    is_peeked = stream.peek(punctuation)
    print(f"\tPeek: {is_peeked}")

    try:
        parsed = stream.parse(punctuation)
    except ParseError as e:
        cli_message("ERROR", repr(e))
        return 1

    print(f"\tParsed at: {', '.join(repr(location) for location in parsed.locations)}")
    print(f"\tRest: {_render_rest(stream)!r}")

    if args.features.printing:
        tokens = TokenStream()
        parsed.to_tokens(tokens)
        print(f"\tPrinted: {tokens.to_source()}")
    return 0


def _render_rest(stream: ParseStream) -> str:
    tokens = TokenStream()
    cursor = stream.cursor()
    while not cursor.is_eof():
        tokens.append(cursor.token())
        cursor = cursor.advance()
    return tokens.to_source()
