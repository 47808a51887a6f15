"""
Top‑level package for the Records API.

This file makes ``records_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``records_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
