"""Configuration package: file locations, persisted settings and derived constants."""
