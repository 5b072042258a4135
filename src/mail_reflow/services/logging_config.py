import json
import logging
import sys
from typing import TextIO

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}

_HANDLER_NAME = "mail_reflow"


class ContextFormatter(logging.Formatter):
    """Append the ``extra`` context of a record as sorted JSON."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}
        if context:
            line += " " + json.dumps(context, sort_keys=True, default=repr)
        return line


def configure_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for existing in list(root_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(ContextFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    handler.set_name(_HANDLER_NAME)
    root_logger.addHandler(handler)
