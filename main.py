#!/usr/bin/env python3
"""
Start the company directory HTTP API using settings from the environment.
"""
import sys

from api.app import create_app
from config.settings import get_settings
from services.errors import DataLoadError


if __name__ == '__main__':
    settings = get_settings()
    try:
        app = create_app(settings=settings)
    except DataLoadError as e:
        print(f"Cannot start: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Company API available at: http://{settings.http_host}:{settings.http_port}")
    try:
        app.run(host=settings.http_host, port=settings.http_port, debug=settings.http_debug, use_reloader=False)
    except KeyboardInterrupt:
        print("\nStopped.")
