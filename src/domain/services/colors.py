"""Palette-based color assignment."""

import random
from collections.abc import Iterable, Sequence


def pick_color(
    palette: Sequence[str],
    used: Iterable[str],
    rng: random.Random | None = None,
) -> str:
    """Pick a palette color nobody uses yet.

    Falls back to the whole palette, collisions allowed, once every color
    is taken.
    """
    chooser = rng or random
    taken = set(used)
    available = [color for color in palette if color not in taken]
    return chooser.choice(available or list(palette))
