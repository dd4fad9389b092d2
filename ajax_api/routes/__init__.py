"""Route handlers for the demo API.

This package contains route handlers organized by functionality:
- contact_logs.py: Contact form validation and update routes
"""
