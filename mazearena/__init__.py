"""Grid maze game states, with agents and benchmarks for the walled maze."""

__version__ = "0.1.0"