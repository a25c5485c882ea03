class StoreError(Exception):
    """A store call failed (connectivity, constraint violation, bad query)."""

    pass
