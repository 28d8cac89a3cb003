"""Mapping from user style choices to renderer shape tokens."""

from models import CornerDotType, CornerSquareType, DotType, ModuleShape, ShapeConfig

# AIDEV-NOTE: Locator patterns must stay detectable, so "rounded" keeps a
# plain dot core instead of matching its extra-rounded outline.
STYLE_TABLE: "dict[ModuleShape, ShapeConfig]" = {
    ModuleShape.SQUARES: ShapeConfig(
        dots_type=DotType.SQUARE,
        corners_square_type=CornerSquareType.SQUARE,
        corners_dot_type=CornerDotType.SQUARE,
    ),
    ModuleShape.DOTS: ShapeConfig(
        dots_type=DotType.DOTS,
        corners_square_type=CornerSquareType.DOT,
        corners_dot_type=CornerDotType.DOT,
    ),
    ModuleShape.ROUNDED: ShapeConfig(
        dots_type=DotType.ROUNDED,
        corners_square_type=CornerSquareType.EXTRA_ROUNDED,
        corners_dot_type=CornerDotType.DOT,
    ),
}


def resolve_style(shape: "ModuleShape | str | None") -> ShapeConfig:
    """Resolve a module shape to its shape tokens.

    Accepts the enum or its string value. Anything unrecognized resolves
    to the squares mapping.
    """
    if not isinstance(shape, ModuleShape):
        try:
            shape = ModuleShape(shape)
        except ValueError:
            shape = ModuleShape.SQUARES
    return STYLE_TABLE[shape]
