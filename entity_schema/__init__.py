"""Object model and tooling for entity schema projects."""

__version__ = "0.1.0"
