"""
Service layer.

Each service encapsulates the business logic for one area and works on
the ``MemoryStore`` passed to it, so the store can be swapped for
another backend without changing the API handlers.
"""
