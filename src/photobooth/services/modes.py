"""Mode catalog lookups."""

from dataclasses import dataclass, field

from photobooth.domain.modes import (
    CATALOG,
    CUSTOM_DISPLAY_NAME,
    CUSTOM_EMOJI,
    Mode,
    ModeKey,
)


@dataclass
class ModeRegistry:
    """Read-only catalog of transformation modes plus the custom slot."""

    catalog: tuple[Mode, ...] = CATALOG
    _by_key: dict[ModeKey, Mode] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_key = {mode.key: mode for mode in self.catalog}
        if ModeKey.CUSTOM in self._by_key:
            raise ValueError("The custom mode cannot be part of the catalog")

    @property
    def default_key(self) -> ModeKey:
        """Return the first catalog mode."""
        return self.catalog[0].key

    def list_modes(self, custom_text: str = "") -> tuple[Mode, ...]:
        """Return the custom slot followed by the catalog in order."""
        return (_custom_mode(custom_text), *self.catalog)

    def get_instruction(self, mode_key: ModeKey | str, custom_text: str) -> str:
        """Resolve the instruction sent to the image model for a mode."""
        key = ModeKey(mode_key)
        if key is ModeKey.CUSTOM:
            return custom_text
        return self._by_key[key].instruction


def _custom_mode(custom_text: str) -> Mode:
    return Mode(
        key=ModeKey.CUSTOM,
        display_name=CUSTOM_DISPLAY_NAME,
        emoji=CUSTOM_EMOJI,
        instruction=custom_text,
    )
