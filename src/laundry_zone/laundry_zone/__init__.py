"""LaundryZone back office package.

Organised by feature modules (customers, catalog, orders, finance, ...) with a
thin Flask controller layer over service/repository layers.
"""
