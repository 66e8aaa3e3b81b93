"""Bookmarks — personal bookmark manager API.

Users sign up with email/password, receive a short-lived JWT,
and manage their own bookmark records. Every bookmark query is
scoped to the authenticated owner.
"""

__version__ = "0.1.0"
