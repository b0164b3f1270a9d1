import asyncio
from concurrent.futures import Executor
from pathlib import Path
from .handler import FileContent
from .resolver import Resolver

# --
# ## Async bridge
#
# Resolution and reads are blocking filesystem calls, these run them on an
# executor so that a coroutine awaiting them does not stall the event loop.
# When no executor is given, the loop's default executor is used.


async def resolveAsync(
	resolver: Resolver, requestPath: str, *, executor: Executor | None = None
) -> Path | None:
	loop = asyncio.get_running_loop()
	return await loop.run_in_executor(executor, resolver.resolve, requestPath)


async def readAsync(
	resolver: Resolver, requestPath: str, *, executor: Executor | None = None
) -> FileContent:
	"""Like `Resolver.read`, raising `NotFound` and `ServeIOError` the
	same way."""
	loop = asyncio.get_running_loop()
	return await loop.run_in_executor(executor, resolver.read, requestPath)


# EOF
