class ServeError(Exception):
	"""Base of the errors raised when serving a file."""


class NotFound(ServeError):
	"""The request path does not resolve to a servable file. The reason is
	deliberately not carried, so that callers can't tell a missing file from
	a rejected one."""

	def __init__(self) -> None:
		super().__init__("File not found")


class ServeIOError(ServeError):
	"""Wraps the I/O failure raised while reading an already resolved file."""

	def __init__(self, error: OSError) -> None:
		super().__init__(f"IO error: {error}")
		self.error: OSError = error


class ConfigError(ValueError):
	pass


# EOF
