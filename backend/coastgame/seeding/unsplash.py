"""Minimal Unsplash API client used by the image seeder."""

import logging
from typing import Dict, List

import requests

logger = logging.getLogger(__name__)


class UnsplashError(Exception):
    """Unsplash answered with an ``errors`` payload."""


class UnsplashClient:
    """Search landscape photos and download their files."""

    BASE_URL = "https://api.unsplash.com"

    def __init__(self, access_key: str, timeout: int = 10):
        self.access_key = access_key
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({'Authorization': f'Client-ID {access_key}'})

    def search_photos(self, query: str, per_page: int) -> List[Dict]:
        """Return the ``results`` list of a photo search.

        Raises ``requests.RequestException`` on transport/HTTP errors and
        ``UnsplashError`` when the API reports errors in the body.
        """
        url = f"{self.BASE_URL}/search/photos"
        params = {
            'query': query,
            'per_page': per_page,
            'orientation': 'landscape',
        }
        response = self.session.get(url, params=params, timeout=self.timeout)
        errors = _api_errors(response)
        if errors:
            raise UnsplashError(', '.join(errors))
        response.raise_for_status()
        return response.json().get('results') or []

    def download(self, url: str, dest_path: str) -> None:
        with self.session.get(url, stream=True, timeout=self.timeout) as response:
            response.raise_for_status()
            with open(dest_path, 'wb') as fh:
                for chunk in response.iter_content(chunk_size=64 * 1024):
                    if chunk:
                        fh.write(chunk)
        logger.debug("Downloaded %s -> %s", url, dest_path)


def _api_errors(response) -> List[str]:
    try:
        data = response.json()
    except ValueError:
        return []
    if not isinstance(data, dict):
        return []
    return [str(e) for e in data.get('errors') or []]
