"""
Top-level package for the catalog dashboard.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    catalog_dash.core
    catalog_dash.views
    catalog_dash.ui
"""

__all__: list[str] = []
