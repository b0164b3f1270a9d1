import mimetypes
from pathlib import Path

mimetypes.init()

DEFAULT_CONTENT_TYPE: str = "application/octet-stream"

# Takes precedence over the platform's registry, which varies between
# systems (`.js` in particular).
MIME_TYPES: dict[str, str] = {
	"bz2": "application/x-bzip",
	"css": "text/css",
	"gz": "application/x-gzip",
	"htm": "text/html",
	"html": "text/html",
	"js": "text/javascript",
	"json": "application/json",
	"md": "text/markdown",
	"mjs": "text/javascript",
	"svg": "image/svg+xml",
	"tar.gz": "application/x-gtar",
	"txt": "text/plain",
	"wasm": "application/wasm",
}


def extensions(path: Path | str) -> list[str]:
	"""Returns the candidate extensions of the given path, longest first, so
	that `archive.tar.gz` yields `["tar.gz", "gz"]`."""
	name = Path(path).name.lstrip(".").lower()
	parts = name.split(".")[1:]
	return [".".join(parts[i:]) for i in range(len(parts))]


def contentType(path: Path | str) -> str:
	"""Guesses the content type from the given path, using the longest
	matching extension and defaulting to `application/octet-stream`."""
	exts = extensions(path)
	for ext in exts:
		if res := MIME_TYPES.get(ext):
			return res
	return (
		(mimetypes.guess_type(Path(path).name)[0] or DEFAULT_CONTENT_TYPE)
		if exts
		else DEFAULT_CONTENT_TYPE
	)


def readBytes(path: Path | str) -> bytes:
	"""Reads the whole file at the given path, the file is closed on return."""
	with open(path, "rb") as f:
		return f.read()


# EOF
