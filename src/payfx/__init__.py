"""Strategy and Observer pattern demonstration: payments and exchange-rate notifications."""

__version__ = "0.1.0"
