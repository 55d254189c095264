"""Rhapsody admin entrypoint.

Run with:
  python -m rhapsody
"""

import logging
import os

import uvicorn

from rhapsody.core.utils import env_flag


def main() -> None:
    logging.basicConfig(
        level=os.getenv("RHAPSODY_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = os.getenv("RHAPSODY_HOST", "0.0.0.0")
    port = int(os.getenv("RHAPSODY_PORT", "8000"))
    reload = env_flag("RHAPSODY_RELOAD")
    uvicorn.run("rhapsody.app:app", host=host, port=port, reload=reload)

if __name__ == "__main__":
    main()
