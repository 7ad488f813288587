"""Worked examples for the fpcontainers package."""
