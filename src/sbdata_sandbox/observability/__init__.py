"""
sbdata_sandbox.observability

Observability package.

Responsibilities:
- Structured logging configuration.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Transaction-scoped log context is bound in `db.session.transaction_scope`.
