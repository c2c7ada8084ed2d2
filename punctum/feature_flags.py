"""Default capability set for generated punctuation token types.

Each flag controls whether the matching capability is composed into types created by
`custom_punctuation` when no explicit feature set is passed for a declaration.
Disabled capability is not stubbed, generated type simply does not have it.
"""

# Peeking and parsing from an parse stream (`peek`, `parse`, `display`)
FEATURE_PARSING = True

# Printing into an output token stream (`to_tokens`, `to_source`)
FEATURE_PRINTING = True

# Cloning (`clone`, `copy.copy`, `copy.deepcopy`)
FEATURE_CLONE_IMPLS = True

# Structural equality, hashing and repr of the canonical symbol text
# Without these, types fall back to identity equality and are unhashable
FEATURE_EXTRA_TRAITS = True
