"""Integrations subpackage for json-describer.

Contains the pytest plugin, auto-discovered through the ``pytest11`` entry
point.  It is not imported here so that importing the package never pulls in
pytest.
"""

from __future__ import annotations

__all__: list[str] = []
