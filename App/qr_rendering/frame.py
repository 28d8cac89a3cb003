"""Frame and caption decoration: labels, caption text and geometry."""

from dataclasses import dataclass

from models import CaptionOption, FrameDecoration, FrameStyle

DEFAULT_CAPTION = "SCAN ME"

CAPTION_TEXT = {
    CaptionOption.SCAN_ME: "SCAN ME",
    CaptionOption.SCAN_TO_VISIT: "SCAN TO VISIT",
    CaptionOption.SCAN_FOR_MORE: "SCAN FOR MORE",
}

# Labels for the combo boxes, in display order
CAPTION_OPTIONS: "list[tuple[CaptionOption, str]]" = [
    (CaptionOption.NONE, "None"),
    (CaptionOption.SCAN_ME, "Scan Me"),
    (CaptionOption.SCAN_TO_VISIT, "Scan to Visit"),
    (CaptionOption.SCAN_FOR_MORE, "Scan for More"),
    (CaptionOption.CUSTOM, "Custom..."),
]

FRAME_OPTIONS: "list[tuple[FrameStyle, str]]" = [
    (FrameStyle.NONE, "None"),
    (FrameStyle.SIMPLE, "Simple"),
    (FrameStyle.ROUNDED, "Rounded"),
    (FrameStyle.BADGE, "Badge"),
    (FrameStyle.TICKET, "Ticket"),
]

# Corner radius in px of the painted border
FRAME_RADIUS = {
    FrameStyle.NONE: 0,
    FrameStyle.SIMPLE: 0,
    FrameStyle.ROUNDED: 16,
    FrameStyle.BADGE: 16,
    FrameStyle.TICKET: 8,
}

FRAME_BORDER_WIDTH = 4  # px


def caption_text(option: CaptionOption, custom_text: str = "") -> str:
    """Resolve the caption shown under (or above) the symbol.

    Custom captions fall back to SCAN ME when left empty.
    """
    if option is CaptionOption.CUSTOM:
        return custom_text or DEFAULT_CAPTION
    return CAPTION_TEXT.get(option, "")


FRAME_PADDING = 12  # px between border and symbol
CAPTION_HEIGHT = 36  # px


@dataclass
class FrameLayout:
    """Pixel geometry of the decorated preview at 1x scale.

    Rects are (x, y, width, height) in widget coordinates.
    """

    width: int
    height: int
    symbol_rect: "tuple[int, int, int, int]"
    caption_rect: "tuple[int, int, int, int] | None"
    radius: int
    border: int


def frame_layout(decoration: FrameDecoration, symbol_size: int) -> FrameLayout:
    """Lay out symbol, border and caption band for a decoration.

    Ticket frames put the caption above the symbol; every other style
    puts it below.
    """
    border = FRAME_BORDER_WIDTH if decoration.has_frame else 0
    padding = FRAME_PADDING if decoration.has_frame else 0
    has_caption = bool(decoration.caption_text)
    caption_on_top = has_caption and decoration.frame_style is FrameStyle.TICKET

    width = symbol_size + 2 * (padding + border)
    y = border
    caption_rect = None

    if caption_on_top:
        caption_rect = (border, y, width - 2 * border, CAPTION_HEIGHT)
        y += CAPTION_HEIGHT

    symbol_rect = (border + padding, y + padding, symbol_size, symbol_size)
    y += symbol_size + 2 * padding

    if has_caption and not caption_on_top:
        caption_rect = (border, y, width - 2 * border, CAPTION_HEIGHT)
        y += CAPTION_HEIGHT

    return FrameLayout(
        width=width,
        height=y + border,
        symbol_rect=symbol_rect,
        caption_rect=caption_rect,
        radius=FRAME_RADIUS.get(decoration.frame_style, 0),
        border=border,
    )
