"""Daily stats model - archived per-bucket counters, source of trends."""

DAILY_STATS_DDL = """
CREATE TABLE IF NOT EXISTS geo_daily_stats (
    stat_date DATE NOT NULL,
    category VARCHAR NOT NULL,
    county VARCHAR NOT NULL,
    town VARCHAR NOT NULL,
    total_registered INTEGER NOT NULL,
    active_today INTEGER NOT NULL,
    PRIMARY KEY (stat_date, category, county, town)
)
"""
