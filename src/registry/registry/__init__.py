# ABOUTME: Core package initialization for the settings registry
# ABOUTME: Provides named settings storage with layered caching and derived configuration snapshots

"""
Settings registry package.

This package stores named configuration entries scoped by an optional module
identifier, serves reads through a two-tier cache, and regenerates a derived
configuration snapshot whenever a behavior-critical setting changes. It follows
clean architecture principles with clear separation between interfaces, models,
implementations and components.
"""

__version__ = "0.1.0"
