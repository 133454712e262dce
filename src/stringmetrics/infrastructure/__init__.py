"""Logging, configuration and fixture file loading."""
