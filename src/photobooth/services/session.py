"""Per-session state shared by the pipeline and the rendering layer."""

from dataclasses import dataclass, field

from photobooth.domain.modes import ModeKey
from photobooth.services.modes import ModeRegistry
from photobooth.services.photos import PhotoStore


@dataclass
class PhotoSession:
    """Owns the active mode, the custom instruction and the photo store.

    ``default_mode`` is the mode a session starts in and returns to when the
    custom editor is closed without text; it falls back to the first catalog
    mode.
    """

    registry: ModeRegistry = field(default_factory=ModeRegistry)
    store: PhotoStore = field(default_factory=PhotoStore)
    default_mode: ModeKey | None = None
    active_mode: ModeKey | None = None
    custom_instruction: str = ""

    def __post_init__(self) -> None:
        if self.default_mode is None:
            self.default_mode = self.registry.default_key
        else:
            self.default_mode = ModeKey(self.default_mode)
        if self.active_mode is None:
            self.active_mode = self.default_mode
        else:
            self.active_mode = ModeKey(self.active_mode)

    def set_mode(self, mode_key: ModeKey | str) -> ModeKey:
        """Switch the mode used for future captures."""
        self.active_mode = ModeKey(mode_key)
        return self.active_mode

    def set_custom_instruction(self, text: str) -> None:
        """Replace the user-supplied custom instruction."""
        self.custom_instruction = text

    def close_custom_editor(self) -> ModeKey:
        """Leave the custom mode when no instruction was entered."""
        if self.active_mode is ModeKey.CUSTOM and not self.custom_instruction.strip():
            self.active_mode = self.default_mode
        return self.active_mode

    def current_instruction(self) -> str:
        """Return the instruction the next capture would be sent with."""
        return self.registry.get_instruction(self.active_mode, self.custom_instruction)
