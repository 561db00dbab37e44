"""Business logic layer for files app.

This package contains the business logic for file operations:
- Filename and upload validation
- Store, download, delete and list on the per-process storage service

Keep it separate from infrastructure (filesystem access) and from
views (HTTP translation).
"""
