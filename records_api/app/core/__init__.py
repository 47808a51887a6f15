"""
Cross‑cutting infrastructure: configuration, logging, database
connections, security and error handling.
"""
