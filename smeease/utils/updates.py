from sqlalchemy import inspect


def apply_changes(instance, changes: dict):
    """Copy the fields of a PUT body onto an ORM row.

    ``null`` is ignored for NOT NULL columns so the stored value stays; a
    nullable column is cleared by it.
    """
    columns = inspect(instance).mapper.columns
    for key, value in changes.items():
        column = columns.get(key)
        if value is None and column is not None and not column.nullable:
            continue
        setattr(instance, key, value)
