"""Accounts core: users, sessions, token pairs and single-use account tokens."""
