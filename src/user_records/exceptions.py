class StoreError(Exception):
    """Raised by store adapters when the backing store call fails.

    The service never inspects the cause; it only maps the failure onto its
    own error taxonomy.
    """

    def __init__(self, operation: str, table: str, cause: Exception | None = None):
        self.operation = operation
        self.table = table
        self.cause = cause
        detail = f"{operation} on table {table!r} failed"
        if cause is not None:
            detail += f": {type(cause).__name__}: {cause}"
        super().__init__(detail)
