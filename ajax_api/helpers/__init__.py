"""Helper utilities for AJAX endpoints.

This package contains utility functions for common tasks:
- request_detector.py: Detect the kinds a request declares (ajax, json, ...)
- form_parser.py: Decode serialized forms into nested data
- validation.py: Group associated-model validation errors per model
- aliasing.py: Rename model keys between view and storage names
- response_formatter.py: Format the {msg, code, data} JSON envelope
"""
