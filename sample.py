"""
Crumbs - cookie string sample

Demonstrates setting, reading and deleting cookies against an in-memory
host cookie string.
Run with: uv run python sample.py
"""


import logging
from datetime import timedelta

from crumbs import CookieOptions, DocumentCookies, MemoryCookieStore, SameSite, parse_all_raw

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S%z",
)
logger = logging.getLogger("crumbs.sample")

store = MemoryCookieStore("session=abc123; theme=light")
cookies = DocumentCookies(
    store,
    default_options=CookieOptions().with_path("/").with_same_site(SameSite.STRICT),
)


if __name__ == "__main__":
    logger.info("Initial cookies: %s", cookies.all())

    cookies.set("theme", "dark mode")
    cookies.set(
        "cart items",
        "apple;pear",
        CookieOptions().with_path("/shop").mark_secure().expires_after(timedelta(days=7)),
    )
    logger.info("After set: %s", cookies.all())
    logger.info("Host cookie string: %s", store.read())
    logger.info("Raw pairs: %s", parse_all_raw(store.read()))

    cookies.delete("session")
    logger.info("After delete: %s", cookies.all())
