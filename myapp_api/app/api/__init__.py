"""
HTTP API package.

``router`` in ``api/router.py`` is the single top-level router that
the application includes.
"""
