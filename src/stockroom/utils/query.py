"""Helpers for reading whole result sets through Protean's DAO query API."""

from collections.abc import Iterator

SCAN_BATCH_SIZE = 100


def iter_records(queryset, batch_size: int = SCAN_BATCH_SIZE) -> Iterator:
    """Yield every record matched by ``queryset``, one page at a time.

    Protean caps each query at a page size, so walking offsets is the only
    way to see a full result set on every provider. ``queryset`` must carry
    a total ordering; pages of an unordered query may overlap or skip rows.
    """
    offset = 0
    while True:
        result = queryset.offset(offset).limit(batch_size).all()
        yield from result.items
        offset += batch_size
        if not result.items or offset >= result.total:
            break
