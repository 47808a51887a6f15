"""
Application package initializer.

The API serves four kinds of records (books, movies, trees and
transport items).  Rather than repeating a router, service and
storage module for each of them, a single generic controller is
instantiated once per resource from the table in
``resources.py``.  Versioning is handled by grouping routers under
the ``api/<version>/`` hierarchy.
"""
