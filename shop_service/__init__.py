"""Django project package for the shop service."""
