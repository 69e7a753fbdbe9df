#!/usr/bin/env python3
"""Start the Display Stand Generator API server."""

import logging

import uvicorn

from standgen import config

if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "standgen.api.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=True,
        reload_dirs=["standgen"],
    )
