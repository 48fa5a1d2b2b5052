#!/usr/bin/env python3
"""Run the geo API with uvicorn."""

import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "web.main:app",
        host=os.getenv("GEO_HOST", "0.0.0.0"),
        port=int(os.getenv("GEO_PORT", "8000")),
    )
