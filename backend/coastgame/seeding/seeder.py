"""Incremental image seeding from Unsplash.

Walks every city's search terms, downloads photos the manifest does not
know yet and appends them to the manifest. Running it again only adds what
is missing: Unsplash ids already present are skipped and each city stops at
``max_per_city`` images.
"""

import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Sequence

import requests

from coastgame.manifest import city_image_count, existing_photo_ids, next_image_number
from .cities import CITIES, City
from .unsplash import UnsplashClient, UnsplashError

logger = logging.getLogger(__name__)

IMAGES_PER_SEARCH_TERM = 3
MAX_IMAGES_PER_CITY = 8
RATE_LIMIT_SEC = 0.5


@dataclass
class SeedReport:
    total: int
    added: int
    skipped: int


def ensure_coast_dirs(images_dir: str, coasts: Sequence[str] = ('west', 'east')) -> None:
    for coast in coasts:
        os.makedirs(os.path.join(images_dir, coast), exist_ok=True)


def seed_images(
    client: UnsplashClient,
    manifest: Dict[str, Any],
    images_dir: str,
    *,
    cities: Mapping[str, Sequence[City]] = CITIES,
    per_term: int = IMAGES_PER_SEARCH_TERM,
    max_per_city: int = MAX_IMAGES_PER_CITY,
    rate_limit: float = RATE_LIMIT_SEC,
    sleep: Callable[[float], None] = time.sleep,
) -> SeedReport:
    """Download new photos into ``images_dir`` and append them to ``manifest`` in place."""
    known_ids = existing_photo_ids(manifest)
    logger.info("Existing images: %s, tracked Unsplash ids: %s", len(manifest['images']), len(known_ids))

    added = skipped = 0
    for coast, coast_cities in cities.items():
        logger.info("=== %s COAST ===", coast.upper())
        for city in coast_cities:
            current = city_image_count(manifest, coast, city.slug)
            if current >= max_per_city:
                logger.info("%s: already have %s images (max: %s), skipping", city.name, current, max_per_city)
                continue
            logger.info("%s: %s/%s images", city.name, current, max_per_city)

            city_added = 0
            number = next_image_number(manifest, coast, city.slug)
            for term in city.search_terms:
                if current + city_added >= max_per_city:
                    break
                try:
                    logger.info("  Searching: %r", term)
                    photos = client.search_photos(term, per_term)
                    for photo in photos:
                        if photo['id'] in known_ids:
                            skipped += 1
                            continue
                        if current + city_added >= max_per_city:
                            break
                        entry = _download_photo(client, photo, coast, city, number, images_dir)
                        manifest['images'].append(entry)
                        known_ids.add(photo['id'])
                        city_added += 1
                        added += 1
                        number += 1
                    if rate_limit:
                        sleep(rate_limit)
                except (requests.RequestException, UnsplashError, OSError, KeyError) as exc:
                    logger.error("    Error while seeding %r: %s", term, exc)

            if city_added:
                logger.info("  Added %s new images", city_added)

    return SeedReport(total=len(manifest['images']), added=added, skipped=skipped)


def _download_photo(client, photo, coast, city, number, images_dir):
    stem = f"{city.slug}-{number:02d}"
    relative_path = f"{coast}/{stem}.jpg"
    logger.info("    Downloading %s.jpg...", stem)
    client.download(photo['urls']['regular'], os.path.join(images_dir, coast, f"{stem}.jpg"))
    return {
        'id': f"{coast}-{stem}",
        'file': relative_path,
        'city': city.name,
        'coast': coast,
        'unsplashId': photo['id'],
        'photographer': (photo.get('user') or {}).get('name') or 'Unknown',
        'unsplashLink': (photo.get('links') or {}).get('html'),
    }
