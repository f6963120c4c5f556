import datetime
import logging


class UTCFormatter(logging.Formatter):
    """``[<utc iso timestamp>] LEVEL logger: message``"""

    def formatTime(self, record, datefmt=None):
        ts = datetime.datetime.fromtimestamp(record.created, tz=datetime.timezone.utc)
        return ts.isoformat()


_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_handler = None


def setup_logging(level: str = "INFO"):
    """Install a single stream handler on the root logger. Safe to call twice."""
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(UTCFormatter(_FORMAT))
        root.addHandler(_handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
