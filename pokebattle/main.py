"""Development entrypoint for running the Flask API locally.

Usage:
- FLASK_APP=pokebattle.main:app flask run --reload
- python -m pokebattle.main
"""

from __future__ import annotations

import logging

from pokebattle import create_app
from pokebattle.config import Config

app = create_app()

if __name__ == "__main__":
    logging.getLogger(__name__).info("Server running at http://localhost:%d", Config.PORT)
    # One worker thread per request
    app.run(host=Config.HOST, port=Config.PORT, threaded=True)
