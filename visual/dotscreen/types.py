"""Type definitions for dot halftone rendering."""

from dataclasses import dataclass
from enum import Enum, auto


class LumaWeighting(Enum):
    """Channel weightings used to turn a color into luma."""

    BT601 = auto()
    BT709 = auto()


class SizingPolicy(Enum):
    """How luma maps to dot size."""

    LINEAR = auto()  # luma scales the radius
    AREA = auto()  # luma scales the surface area


@dataclass(frozen=True)
class DotParams:
    """Parameters for one rendering run."""

    box_size: int = 50
    scale: int = 1
    luma_threshold: float = 1.0
    color: bool = True
    weighting: LumaWeighting = LumaWeighting.BT601
    sizing: SizingPolicy = SizingPolicy.LINEAR

    def __post_init__(self):
        if not 0.0 <= self.luma_threshold <= 1.0:
            raise ValueError(
                f"Invalid luma threshold {self.luma_threshold}, must be between 0.0 and 1.0"
            )


@dataclass(frozen=True)
class RegionColor:
    """Average 8-bit color of one region."""

    r: int
    g: int
    b: int

    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class Dot:
    """A single circle to draw, in output coordinates."""

    cx: int
    cy: int
    radius: int
    fill: str  # "#rrggbb" or "black"

    def style(self) -> str:
        return f"fill:{self.fill};stroke:none"


# Name mappings for CLI and HTTP parameters
WEIGHTING_NAMES = {
    LumaWeighting.BT601: "bt601",
    LumaWeighting.BT709: "bt709",
}

SIZING_NAMES = {
    SizingPolicy.LINEAR: "linear",
    SizingPolicy.AREA: "area",
}

# Reverse mappings
NAME_TO_WEIGHTING = {v: k for k, v in WEIGHTING_NAMES.items()}
NAME_TO_SIZING = {v: k for k, v in SIZING_NAMES.items()}


def parse_weighting_name(name: str) -> LumaWeighting:
    """Parse weighting name to LumaWeighting."""
    if name not in NAME_TO_WEIGHTING:
        valid_names = ", ".join(WEIGHTING_NAMES.values())
        raise ValueError(f"Invalid weighting name: {name}. Valid names: {valid_names}")
    return NAME_TO_WEIGHTING[name]


def parse_sizing_name(name: str) -> SizingPolicy:
    """Parse sizing name to SizingPolicy."""
    if name not in NAME_TO_SIZING:
        valid_names = ", ".join(SIZING_NAMES.values())
        raise ValueError(f"Invalid sizing name: {name}. Valid names: {valid_names}")
    return NAME_TO_SIZING[name]


def all_weighting_names() -> list[str]:
    """List all available weighting names."""
    return list(WEIGHTING_NAMES.values())


def all_sizing_names() -> list[str]:
    """List all available sizing names."""
    return list(SIZING_NAMES.values())
