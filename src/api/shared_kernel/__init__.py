"""Code every WebMall context depends on.

Entity ids, the HTTP error taxonomy, API base models, money formatting,
bearer token verification and the request perimeter (origin checks,
security headers and rate limiting). Keep it small: anything only one
context needs belongs in that context.
"""
