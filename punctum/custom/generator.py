"""Generation of token types for custom (multi-character) punctuation.

Declaration is done once, usually at module level of an `punct` module:

    LeftRightArrow = custom_punctuation("LeftRightArrow", "<=>")

Then generated type is used like any other token:

    stream.peek(LeftRightArrow)             # peeking
    arrow = stream.parse(LeftRightArrow)    # parsing
    arrow.to_tokens(tokens)                 # printing
    LeftRightArrow(location)                # construction from an location
    LeftRightArrow([location, location])    # construction from location of each atom
    arrow.locations                         # access to locations
"""

from __future__ import annotations

import sys

from punctum.custom.base import CustomPunctuation
from punctum.custom.capabilities import (
    CloneCapability,
    ExtraTraitsCapability,
    ParsingCapability,
    PrintingCapability,
)
from punctum.custom.features import PunctuationFeatures
from punctum.punct import DecompositionMode, decompose, decompose_atoms
from punctum.punct.errors import InvalidPunctuationNameError


def custom_punctuation(
    name: str,
    symbol: str,
    *,
    features: PunctuationFeatures | None = None,
    module: str | None = None,
) -> type[CustomPunctuation]:
    """Define an token type that parses and prints given multi-character symbol.

    :param module: Module name generated type reports, defaults to the module of the caller
    :raises PunctuationDeclarationError: If symbol cannot be decomposed into known atoms, no type is created
    """
    if not name.isidentifier():
        raise InvalidPunctuationNameError(name=name, symbol=symbol)

    atoms = decompose_atoms(symbol, DecompositionMode.STRICT)
    length = decompose(symbol, DecompositionMode.LENIENT)
    assert length == len(atoms), "Lenient and strict decomposition must agree on valid symbols"

    if features is None:
        features = PunctuationFeatures.from_feature_flags()

    namespace: dict[str, object] = {
        "__slots__": (),
        "__doc__": f"Custom punctuation `{symbol}` consisting of {length} atom(s).",
        "SYMBOL": symbol,
        "ATOMS": atoms,
        "LENGTH": length,
    }
    if module is None:
        # Generated type belongs to the module that declared it
        module = sys._getframe(1).f_globals.get("__name__", "__main__")
    namespace["__module__"] = module
    if not features.extra_traits:
        # Default object hash is identity one, which is not an capability we provide
        namespace["__hash__"] = None

    return type(name, _capabilities_bases(features), namespace)


def _capabilities_bases(features: PunctuationFeatures) -> tuple[type[CustomPunctuation], ...]:
    bases: list[type[CustomPunctuation]] = []
    if features.parsing:
        bases.append(ParsingCapability)
    if features.printing:
        bases.append(PrintingCapability)
    if features.clone:
        bases.append(CloneCapability)
    if features.extra_traits:
        bases.append(ExtraTraitsCapability)
    return tuple(bases) or (CustomPunctuation,)
