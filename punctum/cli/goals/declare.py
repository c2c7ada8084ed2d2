import sys
from typing import NoReturn

from punctum.cli.output import cli_message
from punctum.cli.parser.arguments import CLIArguments
from punctum.custom import custom_punctuation
from punctum.punct import decompose_atoms

from .check import cli_check_declaration_against_input


def cli_perform_declare_goal(args: CLIArguments) -> NoReturn:
    """Perform declare goal that decomposes symbol, generates type and optionally checks it against input."""
    assert args.symbol is not None

    punctuation = custom_punctuation(args.name, args.symbol, features=args.features)
    atoms = decompose_atoms(args.symbol)
    cli_message(
        "INFO",
        f"Declared {punctuation.__name__} with features: {', '.join(args.features.enabled) or 'none'}",
        verbose=args.verbose,
    )

    print(f"{punctuation.__name__} `{punctuation.SYMBOL}`")
    print(f"\tAtoms: {' '.join(atom.text for atom in atoms)}")
    print(f"\tLocations: {punctuation.LENGTH}")

    if args.input_text is None:
        return sys.exit(0)
    return sys.exit(cli_check_declaration_against_input(args, punctuation))
