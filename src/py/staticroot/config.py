from os import getenv
from pathlib import Path
from typing import Any, Mapping, NamedTuple
from .errors import ConfigError

MOUNT_PATH: str = getenv("STATICROOT_MOUNT", "/")
ROOT_DIR: str = getenv("STATICROOT_ROOT", ".")
SERVE_INDEX: bool = getenv("STATICROOT_INDEX", "1") == "1"


class ServerConfig(NamedTuple):
	"""Configuration of a static file resolver: the URL prefix files are
	mounted at, the directory they're served from, and whether directories
	serve their `index.html`."""

	mountPath: str
	rootDir: Path
	serveIndex: bool

	@staticmethod
	def FromDict(data: Mapping[str, Any]) -> "ServerConfig":
		"""Creates a configuration from a mapping with the `mount_path`,
		`root_dir` and `serve_index` keys. There are no defaults, every
		key must be present and of the expected type."""
		for key in ("mount_path", "root_dir", "serve_index"):
			if key not in data:
				raise ConfigError(f"Missing configuration key: {key}")
		mount_path = data["mount_path"]
		root_dir = data["root_dir"]
		serve_index = data["serve_index"]
		if not isinstance(mount_path, str):
			raise ConfigError(f"Expected a string for mount_path, got: {mount_path!r}")
		if not isinstance(root_dir, (str, Path)):
			raise ConfigError(f"Expected a path for root_dir, got: {root_dir!r}")
		if not isinstance(serve_index, bool):
			raise ConfigError(
				f"Expected a boolean for serve_index, got: {serve_index!r}"
			)
		return ServerConfig(mount_path, Path(root_dir), serve_index)

	@staticmethod
	def FromEnv() -> "ServerConfig":
		"""Creates a configuration from the `STATICROOT_MOUNT`,
		`STATICROOT_ROOT` and `STATICROOT_INDEX` environment variables."""
		return ServerConfig(
			getenv("STATICROOT_MOUNT", MOUNT_PATH),
			Path(getenv("STATICROOT_ROOT", ROOT_DIR)),
			getenv("STATICROOT_INDEX", "1" if SERVE_INDEX else "0") == "1",
		)


# EOF
