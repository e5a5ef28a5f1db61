"""
Application package initializer.

The package is split into ``core`` (settings, logging, errors),
``schemas`` (pydantic models), ``services`` (the record store) and
``api`` (versioned FastAPI routers).  The ASGI application lives in
``main``; it is not imported here so that ``core`` and ``schemas`` can
be used (e.g. by the HTTP client) without building a server app.
"""
