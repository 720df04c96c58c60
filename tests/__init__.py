"""Test suite for the accounts core.

Test structure:
- unit/: Unit tests - domain logic and application services with mocked ports
- integration/: Integration tests - real PyJWT/bcrypt adapters, in-memory
  storage, and full AccountsServer flows
"""
