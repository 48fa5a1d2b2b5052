"""Application settings."""

import json
import os
from pathlib import Path

# Database
DB_PATH = os.getenv("GEO_DB_PATH", "geo.duckdb")

# Logging
LOG_DIR = Path(os.getenv("GEO_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("GEO_LOG_LEVEL", "INFO")

# In-process cache (seconds). Only "default" max_size bounds the store.
CACHE_CONFIG = {
    "default": {"ttl": 300, "max_size": 1000},
    "geo": {"ttl": 600, "max_size": 500},
    "articles": {"ttl": 180, "max_size": 2000},
    "categories": {"ttl": 900, "max_size": 200},
}

# Cloudflare R2
CLOUDFLARE_ACCOUNT_ID = os.getenv("CLOUDFLARE_ACCOUNT_ID")
R2_ACCESS_KEY_ID = os.getenv("R2_ACCESS_KEY_ID")
R2_SECRET_ACCESS_KEY = os.getenv("R2_SECRET_ACCESS_KEY")
R2_BUCKET_NAME = os.getenv("R2_BUCKET_NAME")
R2_PUBLIC_URL = os.getenv("R2_PUBLIC_URL")

# CDN
CDN_TIMEOUT = float(os.getenv("GEO_CDN_TIMEOUT", "10"))
CDN_GLOBAL_NODE = "global-cdn.r2.dev"
CDN_NODES = json.loads(os.getenv("GEO_CDN_NODES") or "null") or {
    "NAIROBI": "nairobi-cdn.r2.dev",
    "MOMBASA": "mombasa-cdn.r2.dev",
    "KISUMU": "kisumu-cdn.r2.dev",
    "NAKURU": "nakuru-cdn.r2.dev",
}

# Sync
GEO_SYNC_INTERVAL = float(os.getenv("GEO_SYNC_INTERVAL", "300"))
GEO_SYNC_ENABLED = os.getenv("GEO_SYNC_ENABLED", "1") == "1"
