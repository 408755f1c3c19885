"""
Test suite for the K12 Harmony Hub UI automation layer.

This package contains:
- data/: read-only fixture tables (events, students, enumerations)
- e2e/: Playwright page workflows and browser scenarios
- smoke/: fast reachability checks with requests
- unit/: offline tests for helpers, fixtures and workflows (mocked page)
"""
