"""Scheduled expiry of unpaid travel bookings and cancellation of their flights."""

__version__ = "0.1.0"
__all__ = ["__version__"]