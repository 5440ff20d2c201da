import logging

# Configure basic logging to console
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)

_logger = logging.getLogger("charbpe")


def info(*args):
    _logger.info(*args)


def debug(*args):
    _logger.debug(*args)
