"""Database schema for the application configuration store."""

SCHEMA = """
-- Application configuration: one string value per (app, key)
CREATE TABLE IF NOT EXISTS appconfig (
    appid TEXT NOT NULL,
    configkey TEXT NOT NULL,
    configvalue TEXT,
    PRIMARY KEY (appid, configkey)
);
"""
