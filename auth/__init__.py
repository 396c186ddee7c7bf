"""
Auth package for FastAPI applications.

Provides HTTP Basic authentication against a user store, an ordered
authorization policy, and the middleware that chains the two in front of
every route.
"""
