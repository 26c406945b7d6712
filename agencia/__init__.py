"""Travel agency model: products, packages, users, bookings and a traveller menu."""

__version__ = "0.1.0"