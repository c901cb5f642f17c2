"""
JobHub API
A job-board backend: users, jobs, applications and contact inquiries.

Architecture:
- FastAPI: HTTP/JSON endpoints under /api
- MongoDB: one collection per entity (users, jobs, applications, contacts)
- Identity: trusted opaque user id from an external identity provider
"""

__version__ = "1.0.0"
