from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from coastgame import db
from coastgame.models import Image, import_manifest


def _entry(image_id, unsplash_id=None, city='Seattle'):
    entry = {'id': image_id, 'file': f'west/{image_id}.jpg', 'city': city, 'coast': 'west'}
    if unsplash_id:
        entry['unsplashId'] = unsplash_id
    return entry


def test_import_skips_repeated_unsplash_id(flask_app, caplog):
    manifest = {'images': [_entry('west-a-01', 'dup'), _entry('west-a-02', 'dup')]}
    assert import_manifest(manifest) == (1, 0, 1)
    assert [img.id for img in Image.query.all()] == ['west-a-01']
    assert any('dup' in rec.getMessage() for rec in caplog.records if rec.levelname == 'WARNING')


def test_import_skips_unsplash_id_held_by_another_row(flask_app):
    assert import_manifest({'images': [_entry('west-a-01', 'u1')]}) == (1, 0, 0)
    assert import_manifest({'images': [_entry('west-b-01', 'u1')]}) == (0, 0, 1)
    assert db.session.get(Image, 'west-b-01') is None
    # the owning row can still be re-imported with its own id
    assert import_manifest({'images': [_entry('west-a-01', 'u1', city='Tacoma')]}) == (0, 1, 0)
    assert db.session.get(Image, 'west-a-01').city == 'Tacoma'


def test_import_keeps_first_of_repeated_ids(flask_app):
    manifest = {'images': [_entry('west-a-01', 'u1', city='Seattle'), _entry('west-a-01', 'u2', city='Tacoma')]}
    assert import_manifest(manifest) == (1, 0, 1)
    image = db.session.get(Image, 'west-a-01')
    assert (image.city, image.unsplash_id) == ('Seattle', 'u1')


def test_import_rolls_back_failed_commit(flask_app, caplog):
    with patch.object(db.session, 'commit', side_effect=SQLAlchemyError('disk full')):
        with pytest.raises(SQLAlchemyError):
            import_manifest({'images': [_entry('west-a-01', 'u1')]})
    assert Image.query.count() == 0
    assert any(rec.levelname == 'ERROR' for rec in caplog.records)


def test_load_manifest_command_survives_duplicates(flask_app):
    import json
    with open(flask_app.config['MANIFEST_PATH'], 'w') as fh:
        json.dump({'images': [_entry('west-a-01', 'dup'), _entry('west-a-02', 'dup')]}, fh)
    result = flask_app.test_cli_runner().invoke(args=['load-manifest'])
    assert result.exit_code == 0, result.output
    assert '1 added, 0 updated, 1 skipped' in result.output
