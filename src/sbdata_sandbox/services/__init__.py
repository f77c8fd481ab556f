"""
sbdata_sandbox.services

Service layer package.

Responsibilities:
- Own transaction boundaries around repository calls.
"""

# Package marker.
