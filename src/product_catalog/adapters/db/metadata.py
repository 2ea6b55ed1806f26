"""MetaData shared by every catalog table.

Constraint names are fixed by convention so migrations and `create_all()`
produce identical schemas.
"""

from sqlalchemy import MetaData

metadata = MetaData(
    naming_convention={
        "pk": "pk_%(table_name)s",
        "ix": "ix_%(table_name)s_%(column_0_name)s",
    }
)
