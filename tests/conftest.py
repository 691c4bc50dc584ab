"""Global pytest configuration.

Registers the shared graph fixtures in `tests.algorithms.sample_graphs` as a
plugin, so graph, path and algorithm tests can all request them by name.
The module is not imported here; pytest imports it with assertion rewriting.
"""

from __future__ import annotations

from importlib.util import find_spec

pytest_plugins: list[str] = []
if find_spec("tests.algorithms.sample_graphs") is not None:
    pytest_plugins = ["tests.algorithms.sample_graphs"]
