"""Simulation configuration and named deployment presets."""

from dataclasses import dataclass, replace
from typing import Dict


@dataclass
class LifeConfig:
    """Configuration for one simulation run."""
    width: int = 64
    height: int = 32
    p_alive: float = 0.2
    seed: int | None = None
    interval: float = 0.1  # seconds between ticks
    alive_glyph: str = "+"
    empty_glyph: str = "_"
    bold: bool = True

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not 0.0 <= self.p_alive <= 1.0:
            raise ValueError(f"p_alive must be in [0, 1], got {self.p_alive}")
        if self.interval < 0:
            raise ValueError(f"interval must be non-negative, got {self.interval}")
        for name in ("alive_glyph", "empty_glyph"):
            glyph = getattr(self, name)
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ValueError(f"{name} must be a single character, got {glyph!r}")
        if self.alive_glyph == self.empty_glyph:
            raise ValueError(f"alive_glyph and empty_glyph must differ, both are {self.alive_glyph!r}")

    @property
    def num_cells(self) -> int:
        return self.width * self.height


PRESETS: Dict[str, LifeConfig] = {
    "classic": LifeConfig(width=64, height=32, p_alive=0.2, empty_glyph="_"),
    "square": LifeConfig(width=64, height=64, p_alive=0.5, empty_glyph="."),
}


def from_preset(name: str, **overrides) -> LifeConfig:
    """Return the named preset with `overrides` applied (None values are ignored)."""
    if name not in PRESETS:
        raise ValueError(f"Unknown preset {name!r}, expected one of {sorted(PRESETS)}")
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return replace(PRESETS[name], **overrides)
