"""
HTTP layer of the API.

``router`` bundles every area router from the ``routes`` subpackage;
the application factory mounts it under ``/api``.
"""
