from .style_fixtures import (
    NOW,
    make_outfit,
    make_item,
    rated,
    work_history,
    basic_wardrobe,
)

__all__ = [
    "NOW",
    "make_outfit",
    "make_item",
    "rated",
    "work_history",
    "basic_wardrobe",
]
