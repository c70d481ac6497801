"""Telemetry, configuration, effects, and the session shell."""
