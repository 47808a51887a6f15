"""
API package containing versioned routes.

A version subpackage exposes a top‑level ``build_router`` which
includes all of its resource routers.
"""
