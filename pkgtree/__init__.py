"""Package names, version constraints, conditional dependencies, phases and pkg.toml tree reading."""

__version__ = "0.1.0"