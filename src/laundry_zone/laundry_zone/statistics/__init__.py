"""Dashboard aggregates over orders, services and financial reports."""
