"""
Pydantic schema definitions for API payloads.

Each resource defines the models used to bind its create and update
parameters and to serialise stored records.  Schemas are separated
from the stores to decouple API representation from persistence.
"""
