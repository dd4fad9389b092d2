"""Middleware components for AJAX endpoints.

This package contains middleware for cross-cutting concerns:
- ajax_gate.py: Request kind gate, raw output and cache suppression
- error_handler.py: Centralized error handling
"""
