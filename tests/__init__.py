"""Test suite for lifelog_auth.

- unit/: service and domain logic against in-memory fakes and mocks
- integration/: real PyJWT, google-auth (patched transport) and SQLAlchemy on SQLite
"""
