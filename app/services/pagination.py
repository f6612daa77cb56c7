"""Page/limit arithmetic shared by paginated listings (pages are 1-based)."""

import math


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit > 0 else 0
