import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
PUBLIC_DIR = os.path.join(BASE_DIR, 'public')

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///' + os.path.join(BASE_DIR, 'coastgame.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    # Feedback windows between a guess and the next image / game over (ms)
    CORRECT_FEEDBACK_MS = int(os.environ.get('CORRECT_FEEDBACK_MS', '1000'))
    INCORRECT_FEEDBACK_MS = int(os.environ.get('INCORRECT_FEEDBACK_MS', '1500'))
    # How long a finished round stays readable, and how long an untouched one lives (s)
    ROUND_RETENTION_SEC = int(os.environ.get('ROUND_RETENTION_SEC', '300'))
    ROUND_IDLE_TIMEOUT_SEC = int(os.environ.get('ROUND_IDLE_TIMEOUT_SEC', '1800'))
    # Image catalog on disk
    IMAGES_DIR = os.environ.get('IMAGES_DIR') or os.path.join(PUBLIC_DIR, 'images')
    MANIFEST_PATH = os.environ.get('MANIFEST_PATH') or os.path.join(PUBLIC_DIR, 'images.json')
    # Unsplash seeding
    UNSPLASH_ACCESS_KEY = os.environ.get('UNSPLASH_ACCESS_KEY')
    UNSPLASH_TIMEOUT_SEC = int(os.environ.get('UNSPLASH_TIMEOUT_SEC', '10'))
    SEED_IMAGES_PER_TERM = int(os.environ.get('SEED_IMAGES_PER_TERM', '3'))
    SEED_MAX_IMAGES_PER_CITY = int(os.environ.get('SEED_MAX_IMAGES_PER_CITY', '8'))
    SEED_RATE_LIMIT_SEC = float(os.environ.get('SEED_RATE_LIMIT_SEC', '0.5'))
