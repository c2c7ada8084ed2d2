from __future__ import annotations

from dataclasses import dataclass, field

from punctum import feature_flags


@dataclass(frozen=True, slots=True)
class PunctuationFeatures:
    """Which capabilities generated punctuation type has, by default taken from feature flags."""

    # Defaults are read when features are created, so patched flags are respected
    parsing: bool = field(default_factory=lambda: feature_flags.FEATURE_PARSING)
    printing: bool = field(default_factory=lambda: feature_flags.FEATURE_PRINTING)
    clone: bool = field(default_factory=lambda: feature_flags.FEATURE_CLONE_IMPLS)
    extra_traits: bool = field(default_factory=lambda: feature_flags.FEATURE_EXTRA_TRAITS)

    @classmethod
    def from_feature_flags(cls) -> PunctuationFeatures:
        """Read feature flags as they are now (flags may be patched after import)."""
        return cls()

    @property
    def enabled(self) -> tuple[str, ...]:
        return tuple(
            name
            for name, is_enabled in (
                ("parsing", self.parsing),
                ("printing", self.printing),
                ("clone", self.clone),
                ("extra-traits", self.extra_traits),
            )
            if is_enabled
        )
