"""Reading and writing the JSON image manifest (``{"images": [...]}``)."""

import json
import logging
import os
import re
from typing import Any, Dict, Iterable, Iterator, Set, Tuple

from coastgame.services.rounds import ImageRecord

logger = logging.getLogger(__name__)

_NUMBER_SUFFIX = re.compile(r'-(\d+)$')


def empty_manifest() -> Dict[str, Any]:
    return {'images': []}


def load_manifest(path: str) -> Dict[str, Any]:
    """Load the manifest at ``path``, or an empty one if it is missing or unreadable."""
    try:
        with open(path, 'r', encoding='utf-8') as fh:
            data = json.load(fh)
    except FileNotFoundError:
        return empty_manifest()
    except (OSError, ValueError) as exc:
        logger.warning("Could not read manifest %s: %s", path, exc)
        return empty_manifest()
    if not isinstance(data, dict) or not isinstance(data.get('images'), list):
        logger.warning("Manifest %s has no 'images' list; starting empty", path)
        return empty_manifest()
    return data


def save_manifest(path: str, manifest: Dict[str, Any]) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as fh:
        json.dump(manifest, fh, indent=2)


def parse_entries(entries: Iterable[Any]) -> Iterator[Tuple[Dict[str, Any], ImageRecord]]:
    """Yield ``(entry, record)`` for each valid manifest entry, logging the malformed ones."""
    for entry in entries:
        try:
            record = ImageRecord.from_dict(entry)
        except (TypeError, ValueError, AttributeError) as exc:
            logger.warning("Skipping malformed image entry %r: %s", entry, exc)
            continue
        yield entry, record


def existing_photo_ids(manifest: Dict[str, Any]) -> Set[str]:
    return {img['unsplashId'] for img in manifest['images'] if img.get('unsplashId')}


def city_image_count(manifest: Dict[str, Any], coast: str, city_slug: str) -> int:
    prefix = f"{coast}-{city_slug}-"
    return sum(
        1 for img in manifest['images']
        if img.get('coast') == coast and prefix in img.get('id', '')
    )


def next_image_number(manifest: Dict[str, Any], coast: str, city_slug: str) -> int:
    """One past the highest ``-NN`` suffix among this city's image ids (1 if none)."""
    prefix = f"{coast}-{city_slug}-"
    numbers = []
    for img in manifest['images']:
        if img.get('coast') != coast or not img.get('id', '').startswith(prefix):
            continue
        match = _NUMBER_SUFFIX.search(img['id'])
        numbers.append(int(match.group(1)) if match else 0)
    return max(numbers) + 1 if numbers else 1
