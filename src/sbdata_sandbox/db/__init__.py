"""
sbdata_sandbox.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, the transaction scope and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here depends on a specific backend; SQLite and PostgreSQL URLs both work.
