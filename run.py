#!/usr/bin/env python3
"""
Kubernetes Resource Gateway
Starts the FastAPI server.
"""

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from kube_gateway.config import get_settings
from kube_gateway.core.logging import setup_logging

# Use the gateway's own logging setup instead of uvicorn's default log_config
setup_logging()

settings = get_settings()

if __name__ == "__main__":
    uvicorn.run(
        "kube_gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_debug,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
