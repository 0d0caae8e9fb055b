"""
Calldata Playground Test Suite.

This package contains:
- unit/: Unit tests (no network)
- integration/: Full app tests against a mocked upstream API
"""
