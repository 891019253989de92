#!/usr/bin/env python3
"""
contractdrift API Starter
Runs the web API (drift analysis and file upload endpoints)
"""

import logging

import uvicorn

from contractdrift.app import application
from contractdrift.helpers.logging_helper import configure_logging


def main() -> None:
    configure_logging(application.settings.log_level)
    logging.info(f"Starting contractdrift API on {application.api_host}:{application.api_port}...")
    logging.info("  - Web endpoints: /api/web/drift/analyze, /api/web/drift/upload, /api/web/drift/info")

    uvicorn.run(
        "contractdrift.interfaces.api.api_app:api_app",
        host=application.api_host,
        port=application.api_port,
        log_level=application.settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
