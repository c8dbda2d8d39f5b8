"""Image seeding: populate the image folder and manifest from Unsplash."""

from .cities import CITIES, City
from .seeder import SeedReport, ensure_coast_dirs, seed_images
from .unsplash import UnsplashClient, UnsplashError

__all__ = [
    'CITIES',
    'City',
    'SeedReport',
    'UnsplashClient',
    'UnsplashError',
    'ensure_coast_dirs',
    'seed_images',
]
