"""Integrations subpackage for json-pattern-match.

Contains adapters for test frameworks:
- JsonPattern equality matcher (usable with plain ``assert``)
- pytest plugin (auto-discovered via pytest11 entry point)

The pytest plugin module is not imported here so that importing the package
does not require pytest.
"""

from __future__ import annotations

from json_pattern_match.integrations._pattern import JsonPattern, matches_json

__all__ = ["JsonPattern", "matches_json"]
