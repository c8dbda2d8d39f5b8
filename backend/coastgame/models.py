import logging

from sqlalchemy.exc import SQLAlchemyError

from coastgame import db
from coastgame.manifest import parse_entries
from coastgame.services.rounds import ImageRecord

logger = logging.getLogger(__name__)


class Image(db.Model):
    __tablename__ = 'image'
    id = db.Column(db.String(128), primary_key=True)
    file = db.Column(db.String(256), nullable=False)
    city = db.Column(db.String(128), nullable=False, index=True)
    coast = db.Column(db.String(8), nullable=False, index=True)  # west, east
    # Seeding provenance (optional for hand-added images)
    unsplash_id = db.Column(db.String(64), unique=True, nullable=True)
    photographer = db.Column(db.String(128), nullable=True)
    unsplash_link = db.Column(db.String(512), nullable=True)

    def to_record(self):
        return ImageRecord.from_dict(self.to_dict())

    def to_dict(self):
        return {
            'id': self.id,
            'file': self.file,
            'city': self.city,
            'coast': self.coast,
        }

    def to_manifest_entry(self):
        entry = self.to_dict()
        if self.unsplash_id:
            entry['unsplashId'] = self.unsplash_id
            entry['photographer'] = self.photographer or 'Unknown'
            entry['unsplashLink'] = self.unsplash_link
        return entry


def import_manifest(manifest):
    """Upsert manifest entries into the image table.

    Returns (added, updated, skipped). Malformed entries are skipped, and so
    are entries repeating an id or an ``unsplashId`` that another image
    already holds. The whole import is rolled back if the commit fails.
    """
    entries = manifest.get('images', [])
    added = updated = skipped = valid = 0
    seen_ids = set()
    claimed = {}  # unsplash_id -> image id, for this import
    for entry, record in parse_entries(entries):
        valid += 1
        if record.id in seen_ids:
            logger.warning("[manifest-import] skipping repeated image id %s", record.id)
            skipped += 1
            continue
        seen_ids.add(record.id)
        unsplash_id = entry.get('unsplashId') or None
        if unsplash_id is not None:
            owner = claimed.get(unsplash_id)
            if owner is None:
                holder = Image.query.filter(Image.unsplash_id == unsplash_id, Image.id != record.id).first()
                owner = holder.id if holder is not None else None
            if owner is not None:
                logger.warning(
                    "[manifest-import] skipping %s: unsplashId %s already used by %s", record.id, unsplash_id, owner,
                )
                skipped += 1
                continue
            claimed[unsplash_id] = record.id
        image = db.session.get(Image, record.id)
        if image is None:
            image = Image(id=record.id)
            added += 1
        else:
            updated += 1
        image.file = record.file
        image.city = record.city
        image.coast = record.coast.value
        image.unsplash_id = unsplash_id
        image.photographer = entry.get('photographer')
        image.unsplash_link = entry.get('unsplashLink')
        db.session.add(image)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("[manifest-import] commit failed, nothing was imported")
        raise
    return added, updated, skipped + len(entries) - valid
