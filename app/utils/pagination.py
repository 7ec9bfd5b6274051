def paginate(query, *, page: int = 1, limit: int = 10):
    """Apply a page window to a select. Pages start at 1."""
    if page < 1:
        page = 1

    if limit < 1:
        limit = 10

    offset = (page - 1) * limit

    return query.offset(offset).limit(limit)
