"""
Endpoint modules of the API.

Each module in this package defines an ``APIRouter`` for one area
(health, auth, users, transactions, admin).  The routers are aggregated
in ``api/router.py`` and mounted under ``/api`` by the application
factory.
"""
