"""Integrations subpackage for json-equivalence.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via the pytest11 entry point), providing
  the ``assert_json_equivalent`` fixture and the ``json_compare_mode`` ini
  option.
"""

from __future__ import annotations

__all__: list[str] = []
