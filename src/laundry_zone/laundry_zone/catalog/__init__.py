"""Laundry services offered by the shop (priced per kilogram)."""
