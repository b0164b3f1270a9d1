import argparse
import sys
from pathlib import Path
from typing import BinaryIO
from .config import ServerConfig
from .errors import NotFound, ServeIOError
from .resolver import Resolver
from .utils.logging import info, error, exception, warning


def main(args: list[str] | None = None, out: BinaryIO | None = None) -> int:
	defaults = ServerConfig.FromEnv()
	parser = argparse.ArgumentParser(
		prog="staticroot",
		description="Resolves request paths to the static files they serve",
		formatter_class=argparse.ArgumentDefaultsHelpFormatter,
	)
	parser.add_argument(
		"-r",
		"--root",
		action="store",
		dest="root",
		help="Root directory files are served from",
		default=str(defaults.rootDir),
	)
	parser.add_argument(
		"-m",
		"--mount",
		action="store",
		dest="mount",
		help="Mount path of the root directory",
		default=defaults.mountPath,
	)
	parser.add_argument(
		"-i",
		"--index",
		action=argparse.BooleanOptionalAction,
		dest="index",
		help="Serves index.html for directories",
		default=defaults.serveIndex,
	)
	parser.add_argument(
		"--resolve",
		action="store_true",
		dest="resolve",
		help="Only prints the resolved paths",
	)
	parser.add_argument("paths", metavar="PATH", nargs="+", help="Request paths")
	options = parser.parse_args(sys.argv[1:] if args is None else args)

	resolver = Resolver.FromConfig(
		ServerConfig(options.mount, Path(options.root), options.index)
	)
	stream: BinaryIO = sys.stdout.buffer if out is None else out
	status: int = 0
	for request_path in options.paths:
		try:
			if options.resolve:
				if (path := resolver.resolve(request_path)) is None:
					raise NotFound()
				stream.write(f"{path}\n".encode())
			else:
				content = resolver.read(request_path)
				info(
					"Serving file",
					path=str(content.path),
					contentType=content.contentType,
					size=len(content.body),
				)
				stream.write(content.body)
		except NotFound as e:
			warning(str(e), path=request_path)
			status = max(status, 1)
		except ServeIOError as e:
			error(str(e), 500, path=request_path)
			exception(e.error, f"While reading {request_path}")
			status = 2
	stream.flush()
	return status


if __name__ == "__main__":
	sys.exit(main())

# EOF
