"""Outer surfaces — text report and HTTP API."""
