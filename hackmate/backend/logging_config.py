from __future__ import annotations

import logging
import sys

from hackmate.backend import config


def configure_logging() -> logging.Logger:
	"""Attach a single stdout handler to the ``hackmate`` logger."""
	level = logging.getLevelName(config.log_level())
	if not isinstance(level, int):
		level = logging.INFO

	app_logger = logging.getLogger("hackmate")
	app_logger.setLevel(level)
	for handler in list(app_logger.handlers):
		app_logger.removeHandler(handler)

	handler = logging.StreamHandler(sys.stdout)
	handler.setFormatter(logging.Formatter(config.log_format()))
	app_logger.addHandler(handler)
	app_logger.propagate = False

	# the SDK and its transport log every request at INFO
	logging.getLogger("openai").setLevel(logging.WARNING)
	logging.getLogger("httpx").setLevel(logging.WARNING)
	return app_logger
