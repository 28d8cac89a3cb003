"""Data models and constants for the QR Studio configurator."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# AIDEV-NOTE: Sampling constants for palette extraction - keep tests in sync
SAMPLE_SIZE = 50  # px, square downsample before bucketing
QUANTIZATION_STEP = 32  # channel step for bucket keys
TOP_BUCKETS = 10
MAX_SATURATED = 3
SATURATION_THRESHOLD = 0.2
ALPHA_THRESHOLD = 128
BRIGHTNESS_MAX = 240
BRIGHTNESS_MIN = 15
DARKEN_FACTOR = 0.8
BRIGHTEN_FACTOR = 1.2

# Rendering constants
PREVIEW_SIZE = 280  # px
DEFAULT_EXPORT_SIZE = 1024  # px
MIN_EXPORT_SIZE = 128  # px
MAX_EXPORT_SIZE = 4096  # px
PLACEHOLDER_URL = "https://custom-qr-code.lovable.app"
LOGO_MARGIN = 8  # px around embedded logo
LOGO_SIZE_CAP = 0.4  # fraction of symbol width
ERROR_CORRECTION = "H"

# Configuration file path
CONFIG_FILE = Path.home() / ".qrstudio_config.json"


class ModuleShape(Enum):
    """User-facing module shape selection."""

    SQUARES = "squares"
    DOTS = "dots"
    ROUNDED = "rounded"


class FillMode(Enum):
    """Foreground fill mode."""

    SOLID = "none"
    LINEAR = "linear"
    RADIAL = "radial"

    @property
    def is_gradient(self) -> bool:
        return self is not FillMode.SOLID


class DotType(Enum):
    """Renderer token for data modules."""

    SQUARE = "square"
    DOTS = "dots"
    ROUNDED = "rounded"


class CornerSquareType(Enum):
    """Renderer token for the locator outline."""

    SQUARE = "square"
    DOT = "dot"
    EXTRA_ROUNDED = "extra-rounded"


class CornerDotType(Enum):
    """Renderer token for the locator core."""

    SQUARE = "square"
    DOT = "dot"


class FrameStyle(Enum):
    """Decorative frame around the rendered symbol."""

    NONE = "none"
    SIMPLE = "simple"
    ROUNDED = "rounded"
    BADGE = "badge"
    TICKET = "ticket"


class CaptionOption(Enum):
    """Call-to-action caption choices."""

    NONE = "none"
    SCAN_ME = "scan-me"
    SCAN_TO_VISIT = "scan-to-visit"
    SCAN_FOR_MORE = "scan-for-more"
    CUSTOM = "custom"


class ExportFormat(Enum):
    """File formats the exporter can write."""

    PNG = "png"
    SVG = "svg"


# --- Palette Models ---


@dataclass(frozen=True)
class ExtractedPalette:
    """Three suggested accent colors derived from an uploaded image.

    AIDEV-NOTE: Always fully populated. Values are '#rrggbb' (lowercase);
    use display() for the uppercase form shown next to swatches.
    """

    primary: str
    secondary: str
    accent: str

    def as_list(self) -> "list[str]":
        return [self.primary, self.secondary, self.accent]

    def display(self) -> "list[str]":
        """Uppercase-normalized colors for labels and tooltips."""
        return [color.upper() for color in self.as_list()]


FALLBACK_PALETTE = ExtractedPalette(
    primary="#0d9488",
    secondary="#14b8a6",
    accent="#2dd4bf",
)


@dataclass
class ColorBucket:
    """A quantized color cluster accumulated during extraction.

    AIDEV-NOTE: r/g/b hold a running blend, not a true mean. Each new
    sample is folded in as (existing + new) / 2, so later samples weigh
    more. Keep it this way; palette outputs depend on it.
    """

    key: "tuple[int, int, int]"
    r: float
    g: float
    b: float
    count: int = 1

    @property
    def color(self) -> "tuple[float, float, float]":
        return (self.r, self.g, self.b)


# --- Settings Models ---


@dataclass
class QRSettings:
    """User-editable configuration for the symbol."""

    content: str = PLACEHOLDER_URL
    fg_color: str = "#0D9488"
    fg_color2: str = "#2DD4BF"
    bg_color: str = "#FFFFFF"
    style: ModuleShape = ModuleShape.SQUARES
    fill_mode: FillMode = FillMode.SOLID
    gradient_rotation: int = 0  # degrees, 0-359, linear only

    # Embedded logo (raw file bytes)
    logo: "bytes | None" = None

    # Export settings
    export_size: int = DEFAULT_EXPORT_SIZE  # px
    export_format: ExportFormat = ExportFormat.PNG


@dataclass
class FrameDecoration:
    """Presentation wrapper around the rendered symbol."""

    frame_style: FrameStyle = FrameStyle.NONE
    caption: CaptionOption = CaptionOption.NONE
    custom_caption: str = ""
    frame_color: str = "#0D9488"
    caption_color: str = "#FFFFFF"

    @property
    def has_frame(self) -> bool:
        return self.frame_style is not FrameStyle.NONE

    @property
    def caption_text(self) -> str:
        from qr_rendering.frame import caption_text

        return caption_text(self.caption, self.custom_caption)

    @property
    def is_active(self) -> bool:
        """True when export must capture the whole decorated preview."""
        return self.has_frame or bool(self.caption_text)


# --- Render Configuration Models ---


@dataclass(frozen=True)
class ShapeConfig:
    """Shape tokens for the three drawable regions."""

    dots_type: DotType
    corners_square_type: CornerSquareType
    corners_dot_type: CornerDotType


@dataclass(frozen=True)
class ColorStop:
    offset: float
    color: str


@dataclass(frozen=True)
class GradientSpec:
    """Gradient descriptor shared by every drawable region."""

    type: FillMode  # LINEAR or RADIAL
    rotation: float  # radians, 0.0 for radial
    color_stops: "tuple[ColorStop, ...]"


@dataclass(frozen=True)
class FillSpec:
    """Either a solid color or a gradient, never both."""

    color: "str | None" = None
    gradient: "GradientSpec | None" = None


@dataclass(frozen=True)
class RegionStyle:
    """Shape token plus fill for one drawable region."""

    shape: "DotType | CornerSquareType | CornerDotType"
    fill: FillSpec


@dataclass(frozen=True)
class LogoOptions:
    """Embedded image passed through to the renderer."""

    image: bytes
    margin: int = LOGO_MARGIN
    image_size: float = LOGO_SIZE_CAP


@dataclass(frozen=True)
class RenderConfiguration:
    """Flattened structure consumed by the symbol renderer.

    AIDEV-NOTE: Rebuilt on every settings change, never persisted.
    Width/height are the only fields that depend on the requested size.
    """

    width: int
    height: int
    data: str
    dots: RegionStyle
    corners_square: RegionStyle
    corners_dot: RegionStyle
    background: str
    logo: "LogoOptions | None" = None
    error_correction: str = ERROR_CORRECTION


@dataclass
class ExportResult:
    """Outcome of an export request."""

    success: bool
    path: "Path | None" = None
    error: "str | None" = None


# --- Persisted Preferences ---


@dataclass
class AppConfig:
    """Preferences restored at startup (content text is never stored)."""

    fg_color: str = "#0D9488"
    fg_color2: str = "#2DD4BF"
    bg_color: str = "#FFFFFF"
    style: str = ModuleShape.SQUARES.value
    fill_mode: str = FillMode.SOLID.value
    gradient_rotation: int = 0
    export_size: int = DEFAULT_EXPORT_SIZE
    export_format: str = ExportFormat.PNG.value

    frame_style: str = FrameStyle.NONE.value
    caption: str = CaptionOption.NONE.value
    frame_color: str = "#0D9488"
    caption_color: str = "#FFFFFF"

    # Palette extraction
    filter_brightness: bool = True

    # Optional logo embedded at startup; its palette seeds the suggestions
    default_logo_path: "str | None" = None

    recent_export_dir: str = field(default_factory=lambda: str(Path.home()))
