"""Device model - distinct devices seen, drives total_registered."""

DEVICE_DDL = """
CREATE TABLE IF NOT EXISTS geo_device (
    device_id VARCHAR PRIMARY KEY,
    category VARCHAR NOT NULL,
    county VARCHAR,
    town VARCHAR,
    first_seen TIMESTAMP NOT NULL,
    last_seen TIMESTAMP NOT NULL
)
"""
