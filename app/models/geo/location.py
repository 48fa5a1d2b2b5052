"""Active location counts model - one row per (category, county, town) bucket."""

LOCATION_SEQ_DDL = """
CREATE SEQUENCE IF NOT EXISTS location_id_seq START 1
"""

LOCATION_COUNTS_DDL = """
CREATE TABLE IF NOT EXISTS active_location_counts (
    location_id INTEGER DEFAULT nextval('location_id_seq'),
    category VARCHAR NOT NULL DEFAULT 'UNKNOWN',
    county VARCHAR,
    town VARCHAR,
    total_registered INTEGER NOT NULL DEFAULT 0,
    active_today INTEGER NOT NULL DEFAULT 0,
    active_now INTEGER NOT NULL DEFAULT 0,
    last_activity TIMESTAMP,
    UNIQUE (category, county, town)
)
"""
