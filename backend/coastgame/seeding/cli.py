import click

from coastgame.manifest import load_manifest, save_manifest
from .seeder import ensure_coast_dirs, seed_images
from .unsplash import UnsplashClient

NO_KEY_HELP = """
No UNSPLASH_ACCESS_KEY found.

To auto-download images:
  1. Get a free API key from https://unsplash.com/developers
  2. Run: UNSPLASH_ACCESS_KEY=your_key flask --app run seed-images

Or add images by hand:
  1. Put .jpg files in {images_dir}/west/ and {images_dir}/east/
  2. Add entries to {manifest_path} like:
     {{
       "id": "west-seattle-01",
       "file": "west/seattle-01.jpg",
       "city": "Seattle",
       "coast": "west"
     }}
  3. Run: flask --app run load-manifest
"""


def run_seed(app, per_term=None, max_per_city=None, load=True):
    """Seed images using the app's configuration; returns the SeedReport or None without a key."""
    cfg = app.config
    images_dir = cfg['IMAGES_DIR']
    manifest_path = cfg['MANIFEST_PATH']
    access_key = cfg.get('UNSPLASH_ACCESS_KEY')
    if not access_key:
        click.echo(NO_KEY_HELP.format(images_dir=images_dir, manifest_path=manifest_path))
        return None

    click.echo('Coast or Coast - Image Seeder')
    click.echo('=============================')
    ensure_coast_dirs(images_dir)
    manifest = load_manifest(manifest_path)
    client = UnsplashClient(access_key, timeout=int(cfg.get('UNSPLASH_TIMEOUT_SEC', 10)))
    report = seed_images(
        client,
        manifest,
        images_dir,
        per_term=per_term or int(cfg.get('SEED_IMAGES_PER_TERM', 3)),
        max_per_city=max_per_city or int(cfg.get('SEED_MAX_IMAGES_PER_CITY', 8)),
        rate_limit=float(cfg.get('SEED_RATE_LIMIT_SEC', 0.5)),
    )
    save_manifest(manifest_path, manifest)

    click.echo('=============================')
    click.echo(f'Total images: {report.total}')
    click.echo(f'New images downloaded: {report.added}')
    click.echo(f'Duplicates skipped: {report.skipped}')
    click.echo(f'Manifest saved to: {manifest_path}')

    if load:
        from coastgame.models import import_manifest
        added, updated, skipped = import_manifest(manifest)
        app.logger.info(f"[manifest-load] path={manifest_path} added={added} updated={updated} skipped={skipped}")
        click.echo(f'Catalog updated: {added} added, {updated} updated')
    return report
