"""Adapters connecting perfevents to concrete telemetry backends."""
