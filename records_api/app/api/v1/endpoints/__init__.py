"""
Endpoint subpackage for API v1.

``resources`` generates the CRUD router for any registered resource;
``info`` describes what is registered.  The routers are aggregated in
``router.py`` at the package level.
"""
