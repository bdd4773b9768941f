"""Forward caller text to a single remote HTTP endpoint as a JSON envelope."""

__version__ = "0.1.0"
