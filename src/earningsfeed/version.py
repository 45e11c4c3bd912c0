"""Product identification sent in the User-Agent header."""

PRODUCT_NAME = "earningsfeed-python"
__version__ = "0.1.0"

USER_AGENT = f"{PRODUCT_NAME}/{__version__}"
