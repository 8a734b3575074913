"""
Top-level package for the endangered species browser.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    esa_browser.core
    esa_browser.views
    esa_browser.ui
"""

__all__: list[str] = []
