from .files import contentType, readBytes, DEFAULT_CONTENT_TYPE  # NOQA: F401

# EOF
