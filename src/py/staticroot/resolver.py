import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, ClassVar
from .config import ServerConfig
from .errors import NotFound, ServeIOError
from .handler import FileContent, StaticHandler
from .utils.files import contentType as guessContentType, readBytes
from .utils.logging import LogLevel, debug, error, logged

# -----------------------------------------------------------------------------
#
# MOUNT PATH
#
# -----------------------------------------------------------------------------


def normalizeMountPath(path: str) -> str:
	"""Normalizes a mount path so that it is either `/` or starts with
	exactly one slash and has no trailing slash."""
	if path == "/":
		return "/"
	trimmed = path.strip("/")
	return f"/{trimmed}" if trimmed else "/"


def canonical(path: Path) -> Path | None:
	"""Returns the absolute path with all symlinks and `..` segments
	resolved, or `None` when the path (or a link target) doesn't exist."""
	try:
		return path.resolve(strict=True)
	# NOTE: `ValueError` is raised for embedded NUL bytes, `RuntimeError`
	# for symlink loops on older Pythons.
	except (OSError, RuntimeError, ValueError):
		return None


def checkPath(path: Path, test: Callable[[os.stat_result], bool]) -> bool | None:
	"""Stats the path and applies `test` to the result, returning `False`
	when the path does not exist and `None` when it can't be examined (too
	long a name, an unsearchable parent, an embedded NUL)."""
	try:
		return test(path.stat())
	except (FileNotFoundError, NotADirectoryError):
		return False
	except (OSError, ValueError):
		return None


# -----------------------------------------------------------------------------
#
# RESOLVER
#
# -----------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class Resolver(StaticHandler):
	"""Resolves request paths under a mount path to files within a root
	directory. A resolved file is always a regular file whose canonical path
	lies within the canonical root, symlinks included."""

	INDEX: ClassVar[str] = "index.html"

	mountPath: str
	rootDir: Path
	serveIndex: bool = False
	reader: Callable[[Path], bytes] = readBytes
	contentType: Callable[[Path], str] = guessContentType

	@classmethod
	def FromConfig(
		cls,
		config: ServerConfig,
		*,
		reader: Callable[[Path], bytes] = readBytes,
		contentType: Callable[[Path], str] = guessContentType,
	) -> "Resolver":
		return cls(
			mountPath=config.mountPath,
			rootDir=Path(config.rootDir),
			serveIndex=config.serveIndex,
			reader=reader,
			contentType=contentType,
		)

	def __post_init__(self) -> None:
		object.__setattr__(self, "mountPath", normalizeMountPath(self.mountPath))
		object.__setattr__(self, "rootDir", Path(self.rootDir))

	def relativePath(self, requestPath: str) -> str | None:
		"""Returns the request path relative to the mount path, or `None`
		if the request path is not under the mount path."""
		if not requestPath.startswith(self.mountPath):
			return None
		rest = requestPath[len(self.mountPath) :]
		# Only one slash is stripped: `/static//a` yields an absolute path that
		# containment then rejects.
		return rest[1:] if rest.startswith("/") else rest

	def resolve(self, requestPath: str) -> Path | None:
		"""Returns the canonical path of the file to serve for the given
		request path, or `None` if there is none."""
		relative = self.relativePath(requestPath)
		if relative is None:
			return self.reject(requestPath, "outside mount")
		# NOTE: We don't filter `..` here, containment is checked on the
		# canonical paths below, which also covers symlinks.
		candidate = self.rootDir / relative
		if self.serveIndex:
			if (isDir := checkPath(candidate, lambda _: stat.S_ISDIR(_.st_mode))) is None:
				return self.reject(requestPath, "unresolvable")
			elif isDir:
				candidate = candidate / self.INDEX
		if (path := canonical(candidate)) is None:
			return self.reject(requestPath, "unresolvable")
		if (root := canonical(self.rootDir)) is None:
			return self.reject(requestPath, "root unresolvable")
		if not path.is_relative_to(root):
			return self.reject(requestPath, "outside root")
		if not checkPath(path, lambda _: stat.S_ISREG(_.st_mode)):
			return self.reject(requestPath, "not a file")
		return path

	def read(self, requestPath: str) -> FileContent:
		"""Returns the content of the file for the given request path."""
		path = self.resolve(requestPath)
		if path is None:
			raise NotFound()
		try:
			body = self.reader(path)
		except OSError as e:
			error("Could not read resolved file", "EIO", path=str(path), reason=str(e))
			raise ServeIOError(e) from e
		return FileContent(body=body, contentType=self.contentType(path), path=path)

	def reject(self, requestPath: str, reason: str) -> None:
		# The reason is only ever logged, callers just get `None`.
		if logged(LogLevel.Debug):
			debug("Rejected request path", path=requestPath, reason=reason)
		return None

	def __repr__(self) -> str:
		return f"(Resolver {self.mountPath} → {self.rootDir}{' :index' if self.serveIndex else ''})"


# EOF
