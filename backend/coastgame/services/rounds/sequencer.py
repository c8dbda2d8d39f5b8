import random
from typing import Iterable, Optional, Tuple

from .records import Coast, ImageRecord


PlaySequence = Tuple[ImageRecord, ...]


def build_sequence(images: Iterable[ImageRecord], rng: Optional[random.Random] = None) -> PlaySequence:
    """Build a balanced, shuffled play order for one game.

    - Splits the images by coast and shuffles each side independently
    - Truncates both sides to the size of the smaller one
    - Shuffles the combined list once more

    If either coast has no images the result is empty. Pass a seeded
    ``random.Random`` as ``rng`` to get a reproducible order; otherwise every
    call uses fresh randomness.
    """
    rng = rng or random.Random()
    images = list(images)
    west = [img for img in images if img.coast == Coast.WEST]
    east = [img for img in images if img.coast == Coast.EAST]
    min_count = min(len(west), len(east))

    rng.shuffle(west)
    rng.shuffle(east)
    balanced = west[:min_count] + east[:min_count]
    rng.shuffle(balanced)
    return tuple(balanced)
