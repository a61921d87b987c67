import logging
import sys
from pathlib import Path
from typing import Union

# paquetes propios: todo lo demás sólo ERROR+ en consola
_APP_PACKAGES = ("app", "controller", "core", "gui", "storage")


class _ConsoleNoiseFilter(logging.Filter):
    """Keep our own logs on the console; third-party libraries only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.split(".", 1)[0]
        if top in _APP_PACKAGES or record.name == "__main__":
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: Union[str, Path] = ".local/panels",
    console_level: Union[int, str] = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Console handler (filtered) + file handler with everything.

    Call once, before the window is built. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "panels.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
