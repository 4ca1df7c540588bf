"""Stub logging backend that records every call instead of emitting it."""

from blinker import Signal

LEVELS = (
    "emergency",
    "alert",
    "critical",
    "error",
    "warning",
    "notice",
    "info",
    "debug",
    "log",
)


class RecordingLogger:
    """Captures connect/close and leveled log calls in call order.

    Lifecycle calls are stored as a bare tag string ("connect", "close").
    Leveled calls are stored as ``[level, *args]`` with the arguments kept
    as-is; keyword arguments, when given, follow as a trailing dict. None of
    the methods raise.
    """

    def __init__(self):
        self.items = []
        self.on_error = Signal("error")

    def connect(self):
        self.items.append("connect")

    def close(self):
        self.items.append("close")

    def emergency(self, /, *args, **kwargs):
        self._record("emergency", *args, **kwargs)

    def alert(self, /, *args, **kwargs):
        self._record("alert", *args, **kwargs)

    def critical(self, /, *args, **kwargs):
        self._record("critical", *args, **kwargs)

    def error(self, /, *args, **kwargs):
        self._record("error", *args, **kwargs)

    def warning(self, /, *args, **kwargs):
        self._record("warning", *args, **kwargs)

    def notice(self, /, *args, **kwargs):
        self._record("notice", *args, **kwargs)

    def info(self, /, *args, **kwargs):
        self._record("info", *args, **kwargs)

    def debug(self, /, *args, **kwargs):
        self._record("debug", *args, **kwargs)

    def log(self, /, *args, **kwargs):
        self._record("log", *args, **kwargs)

    def _record(self, level, /, *args, **kwargs):
        if kwargs:
            self.items.append([level, *args, kwargs])
        else:
            self.items.append([level, *args])

    def leveled(self, level=None):
        """Return the leveled records, optionally only those at ``level``."""
        return [
            item for item in self.items
            if isinstance(item, list) and (level is None or item[0] == level)
        ]

    def clear(self):
        """Drop everything recorded so far."""
        self.items.clear()
