"""Global pytest configuration.

Registers the sample graph fixtures from ``tests.algorithms.sample_graphs`` as
a plugin so pytest imports it with assertion rewriting enabled.
"""

from __future__ import annotations

from importlib.util import find_spec

pytest_plugins: list[str] = []
if find_spec("tests.algorithms.sample_graphs") is not None:
    pytest_plugins = ["tests.algorithms.sample_graphs"]
