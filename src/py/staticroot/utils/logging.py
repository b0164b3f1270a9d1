import os
import sys
import time
from enum import Enum
from typing import NamedTuple, TypeAlias, ClassVar
from contextvars import ContextVar

ERR = sys.stderr

# SEE: https://no-color.org/
NO_COLOR: bool = "NO_COLOR" in os.environ
FORCE_COLOR: bool = "FORCE_COLOR" in os.environ
COLOR: bool = FORCE_COLOR or NO_COLOR is False

TContext: TypeAlias = dict[str, str | int | float | bool | None]

LogOrigin: ContextVar[str] = ContextVar("LogOrigin", default="staticroot")


class LogLevel(Enum):
	Debug = 0
	Info = 10
	Warning = 30
	Error = 40  # A managed error
	Exception = 50  # An un-managed error


LOG_LEVEL_COLOR = {
	LogLevel.Debug: 31,
	LogLevel.Info: 75,
	LogLevel.Warning: 202,
	LogLevel.Error: 160,
	LogLevel.Exception: 124,
}

LOG_LEVELS: dict[str, LogLevel] = {
	"debug": LogLevel.Debug,
	"info": LogLevel.Info,
	"warning": LogLevel.Warning,
	"error": LogLevel.Error,
}

LOG_LEVEL: LogLevel = LOG_LEVELS.get(
	os.getenv("STATICROOT_LOG_LEVEL", "info").lower(), LogLevel.Info
)


class Term:
	BOLD: ClassVar[str] = "\033[1m" if COLOR else ""
	RESET: ClassVar[str] = "\033[0m" if COLOR else ""

	@staticmethod
	def Color(color: int) -> str:
		return f"\033[0;38;5;{color}m" if COLOR else ""


class LogEntry(NamedTuple):
	origin: str
	time: float
	level: LogLevel = LogLevel.Info
	message: str | None = None
	value: int | str | None = None
	context: TContext | None = None


def setLevel(level: LogLevel | str) -> LogLevel:
	"""Sets the minimum level of the entries that are written out."""
	global LOG_LEVEL
	LOG_LEVEL = LOG_LEVELS[level.lower()] if isinstance(level, str) else level
	return LOG_LEVEL


def logged(level: LogLevel) -> bool:
	"""Tells if entries of the given level are currently written out. This
	is used to guard against building entries when not necessary."""
	return level.value >= LOG_LEVEL.value


def formatData(value: object) -> str:
	if value is None or value == () or value == [] or value == {}:
		return "◌"
	elif isinstance(value, dict):
		return " ".join(
			f"{Term.BOLD}{k}{Term.RESET}={formatData(v)}" for k, v in value.items()
		)
	elif isinstance(value, str):
		return repr(value) if " " in value else value
	elif isinstance(value, bool):
		return "✓" if value else "✗"
	elif isinstance(value, float):
		return f"{value:0.2f}"
	else:
		return str(value)


def send(entry: LogEntry) -> LogEntry:
	if not logged(entry.level):
		return entry
	clr: str = Term.Color(LOG_LEVEL_COLOR[entry.level])
	code: str = f" [{entry.value}]" if entry.value is not None else ""
	ERR.write(
		f"{clr}{Term.BOLD}[{entry.origin}]{code}{Term.RESET} {entry.message} {formatData(entry.context)}{Term.RESET}\n"
	)
	ERR.flush()
	return entry


def entry(
	*,
	origin: str | None = None,
	at: float | None = None,
	level: LogLevel = LogLevel.Info,
	message: str | None = None,
	value: int | str | None = None,
	context: TContext,
) -> LogEntry:
	return LogEntry(
		origin=origin or LogOrigin.get(),
		time=time.time() if at is None else at,
		level=level,
		message=message,
		value=value,
		context=context,
	)


def debug(
	message: str,
	*,
	origin: str | None = None,
	at: float | None = None,
	**context: str | int | float | bool | None,
) -> LogEntry:
	return send(
		entry(
			message=message,
			level=LogLevel.Debug,
			origin=origin,
			at=at,
			context=context,
		)
	)


def info(
	message: str,
	*,
	origin: str | None = None,
	at: float | None = None,
	**context: str | int | float | bool | None,
) -> LogEntry:
	return send(entry(message=message, origin=origin, at=at, context=context))


def warning(
	message: str,
	*,
	origin: str | None = None,
	at: float | None = None,
	**context: str | int | float | bool | None,
) -> LogEntry:
	return send(
		entry(
			message=message,
			level=LogLevel.Warning,
			origin=origin,
			at=at,
			context=context,
		)
	)


def error(
	message: str,
	code: int | str | None,
	*,
	origin: str | None = None,
	at: float | None = None,
	**context: str | int | float | bool | None,
) -> LogEntry:
	return send(
		entry(
			message=message,
			value=code,
			level=LogLevel.Error,
			origin=origin,
			at=at,
			context=context,
		)
	)


def exception(
	exception: BaseException,
	message: str | None = None,
) -> BaseException:
	try:
		stream = ERR
		stream.write(
			f"!!! EXCP {f'{message}: [{exception.__class__.__name__}] {exception}' if message else f'[{exception.__class__.__name__}] {exception}'}\n"
		)
		tb = exception.__traceback__
		while tb:
			code = tb.tb_frame.f_code
			stream.write(
				f"... in {code.co_name:15s} at {tb.tb_lineno:4d} in {code.co_filename}\n",
			)
			tb = tb.tb_next
		stream.flush()
	except Exception:  # nosec: B110
		# Swallow all exceptions so that this function can be called from an exception
		# handler safely, such as in the implementation of logging/logging sinks.
		pass

	# Return the exception so that this function can be called like:
	#   raise exception(error)
	return exception


# EOF
