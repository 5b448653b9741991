"""Layout Repair Service - repair pass for generated UI component trees."""

__version__ = "0.1.0"
