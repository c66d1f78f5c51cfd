"""Run configuration: CLI-derived settings and logging setup."""
