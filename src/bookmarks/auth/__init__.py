"""Authentication and authorization.

Users sign up or sign in with email/password and get back a short-lived
JWT access token. Every other route expects that token as a Bearer
credential; it resolves to a "current identity" used to scope
bookmark queries to their owner.
"""
