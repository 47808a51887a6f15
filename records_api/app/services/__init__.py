"""
Service layer abstraction.

``ResourceController`` holds the CRUD algorithm shared by every
resource; it talks to storage only through the ``EntityStore``
interface so the backend can be swapped without touching handlers.
"""
