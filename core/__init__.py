"""Core application for the shop service: catalog, users, orders."""
