"""Helpers shared by the unit, smoke and E2E suites."""
