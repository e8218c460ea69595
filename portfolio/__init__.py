"""Portfolio site builder and generated-page verifier."""

__version__ = "1.0.0"
