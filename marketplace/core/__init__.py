"""Configuration, wiring and process-wide setup."""
