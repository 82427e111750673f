"""Common literal values used across blog_pages.

These constants keep filenames, URL prefixes, and format defaults centralized
so helpers, loaders, and tests import the same values without drifting.
Intended for internal use within the blog_pages package.

Examples
--------
>>> from blog_pages import _constants
>>> _constants.ASSET_URL_PREFIX + "theme.css"
'/assets/theme.css'
>>> _constants.REV_MANIFEST_NAME
'rev-manifest.json'
"""

ASSET_URL_PREFIX = "/assets/"
REV_MANIFEST_NAME = "rev-manifest.json"
FEED_READER_PREFIX = "https://feedly.com/i/subscription/feed/"
DEFAULT_DATE_FORMAT = "YYYY-MM-DDTHH:mm:ss.SSSZ"
DEFAULT_PARTIAL_EXTENSION = ".jinja"
DEFAULT_LAYOUT = "post.jinja"
INDEX_DOCUMENT = "index.html"
TAG_PATH_TEMPLATE = "tag/{slug}/"
