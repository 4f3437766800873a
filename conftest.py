"""Root conftest: lets pytest import simrand from a source checkout."""
