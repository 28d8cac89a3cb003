"""Tests for caption text and frame geometry."""

from models import CaptionOption, FrameDecoration, FrameStyle
from qr_rendering.frame import (
    CAPTION_HEIGHT,
    FRAME_BORDER_WIDTH,
    FRAME_PADDING,
    caption_text,
    frame_layout,
)


class TestCaptionText:
    def test_presets(self):
        assert caption_text(CaptionOption.NONE) == ""
        assert caption_text(CaptionOption.SCAN_ME) == "SCAN ME"
        assert caption_text(CaptionOption.SCAN_TO_VISIT) == "SCAN TO VISIT"
        assert caption_text(CaptionOption.SCAN_FOR_MORE) == "SCAN FOR MORE"

    def test_custom_text(self):
        assert caption_text(CaptionOption.CUSTOM, "Menu") == "Menu"

    def test_empty_custom_falls_back(self):
        assert caption_text(CaptionOption.CUSTOM, "") == "SCAN ME"

    def test_preset_ignores_custom_text(self):
        assert caption_text(CaptionOption.SCAN_ME, "ignored") == "SCAN ME"


class TestFrameDecoration:
    def test_default_is_inactive(self):
        decoration = FrameDecoration()
        assert not decoration.has_frame
        assert not decoration.is_active

    def test_caption_alone_is_active(self):
        assert FrameDecoration(caption=CaptionOption.SCAN_ME).is_active

    def test_frame_alone_is_active(self):
        assert FrameDecoration(frame_style=FrameStyle.SIMPLE).is_active


class TestFrameLayout:
    def test_undecorated_matches_symbol(self):
        layout = frame_layout(FrameDecoration(), 280)

        assert (layout.width, layout.height) == (280, 280)
        assert layout.symbol_rect == (0, 0, 280, 280)
        assert layout.caption_rect is None
        assert layout.border == 0

    def test_simple_frame_with_caption_below(self):
        decoration = FrameDecoration(
            frame_style=FrameStyle.SIMPLE, caption=CaptionOption.SCAN_ME
        )
        layout = frame_layout(decoration, 280)
        inset = FRAME_BORDER_WIDTH + FRAME_PADDING

        assert layout.width == 280 + 2 * inset
        assert layout.height == 280 + 2 * inset + CAPTION_HEIGHT
        assert layout.symbol_rect == (inset, inset, 280, 280)
        assert layout.caption_rect[1] == 280 + 2 * inset - FRAME_BORDER_WIDTH

    def test_ticket_puts_caption_on_top(self):
        decoration = FrameDecoration(
            frame_style=FrameStyle.TICKET, caption=CaptionOption.SCAN_ME
        )
        layout = frame_layout(decoration, 280)

        assert layout.caption_rect[1] == FRAME_BORDER_WIDTH
        assert layout.symbol_rect[1] == FRAME_BORDER_WIDTH + CAPTION_HEIGHT + FRAME_PADDING

    def test_radius_follows_style(self):
        assert frame_layout(FrameDecoration(frame_style=FrameStyle.SIMPLE), 100).radius == 0
        assert frame_layout(FrameDecoration(frame_style=FrameStyle.ROUNDED), 100).radius == 16
        assert frame_layout(FrameDecoration(frame_style=FrameStyle.TICKET), 100).radius == 8

    def test_caption_without_frame_has_no_border(self):
        layout = frame_layout(FrameDecoration(caption=CaptionOption.SCAN_ME), 280)

        assert layout.border == 0
        assert layout.width == 280
        assert layout.height == 280 + CAPTION_HEIGHT
