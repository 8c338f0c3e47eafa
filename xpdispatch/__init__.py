"""State and presentation-derivation layer of a flight-simulator dispatch companion."""

__version__ = "0.1.0"
