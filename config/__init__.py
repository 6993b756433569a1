"""
Configuration Package

Settings live in config/settings.py (overridable through .env).
"""
