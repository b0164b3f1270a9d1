from abc import ABC, abstractmethod
from pathlib import Path
from typing import NamedTuple
from mypy_extensions import mypyc_attr


class FileContent(NamedTuple):
	"""A file that can be returned for a request, with its content type."""

	body: bytes
	contentType: str
	path: Path


# NOTE: Handlers may be implemented in plain Python even when the package
# is compiled with mypyc.
@mypyc_attr(allow_interpreted_subclasses=True)
class StaticHandler(ABC):
	"""The capability of answering a request path with a single file."""

	__slots__ = ()

	@abstractmethod
	def read(self, requestPath: str) -> FileContent:
		"""Returns the file for the given request path, raising `NotFound`
		when there is none and `ServeIOError` when it can't be read."""
		...


# EOF
