"""WSGI entrypoint for development and production (project root).

Creates the Flask application by calling create_app() from the
`backend.accounts` package, so it can be referenced as `wsgi:app`.

Usage examples:
  - Development: python -m flask --app wsgi:app run --debug
  - Gunicorn:   gunicorn wsgi:app -w 4 -b 0.0.0.0:8000
"""
import os

from dotenv import load_dotenv
from backend.accounts import create_app
from backend.accounts.config import config

load_dotenv()

app = create_app(config.get(os.environ.get('APP_ENV', 'default'), config['default']))

if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False))
