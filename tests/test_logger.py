import logging

from postureguard.utils import logger as plog


class _Collect(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_level_helpers():
    handler = _Collect()
    previous = plog.logger.level
    plog.logger.addHandler(handler)
    plog.logger.setLevel(logging.DEBUG)
    try:
        plog.debug("d")
        plog.info("i")
        plog.log("l")
        plog.warn("w")
        plog.error("e")
    finally:
        plog.logger.removeHandler(handler)
        plog.logger.setLevel(previous)

    assert [(r.levelname, r.getMessage()) for r in handler.records] == [
        ("DEBUG", "d"),
        ("INFO", "i"),
        ("INFO", "l"),
        ("WARNING", "w"),
        ("ERROR", "e"),
    ]
