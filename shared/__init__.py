"""Shared contracts, logging and telemetry helpers for the FIB payments proxy."""
