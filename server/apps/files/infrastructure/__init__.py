"""Infrastructure layer for files app.

This package contains integrations with external systems:
- Local filesystem storage rooted at a configured directory
- Metadata helpers (MIME type, Content-Disposition)

Keep infrastructure concerns separate from business logic.
"""
