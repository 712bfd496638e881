from dataclasses import dataclass, field

@dataclass
class ScrollbarStyle:
    height: int = 4
    margin: int = 6
    radius: int = 2
    min_thumb_size: int = 24
    show_when_no_overflow: bool = False
    track_color: tuple[int, int, int, int] = (255, 255, 255, 32)
    thumb_color: tuple[int, int, int, int] = (255, 255, 255, 192)

@dataclass
class CarouselStyle:
    bg_rgb: tuple[int, int, int] = (24, 26, 32)
    item_rgb: tuple[int, int, int] = (70, 110, 180)
    item_alt_rgb: tuple[int, int, int] = (90, 140, 210)
    item_radius: int = 10
    label_rgb: tuple[int, int, int] = (237, 237, 237)
    marker_rgb: tuple[int, int, int] = (255, 196, 64)   # the snapping edge line
    marker_px: int = 2
    font_size: int = 20
    scrollbar: ScrollbarStyle = field(default_factory=ScrollbarStyle)
