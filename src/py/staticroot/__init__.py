from .config import ServerConfig  # NOQA: F401
from .errors import ServeError, NotFound, ServeIOError, ConfigError  # NOQA: F401
from .handler import FileContent, StaticHandler  # NOQA: F401
from .resolver import Resolver, normalizeMountPath  # NOQA: F401
from .aio import resolveAsync, readAsync  # NOQA: F401

# EOF
