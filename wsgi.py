"""WSGI entry point: gunicorn wsgi:app"""

from app import create_app
from settings import Settings, configure_logging

settings = Settings.from_env()
configure_logging(settings.log_level)

app = create_app(settings)
