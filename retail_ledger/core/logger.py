import logging
from colorlog import ColoredFormatter
from retail_ledger.core.settings import settings

LOG_FORMAT = (
    "%(log_color)s[%(asctime)s] [%(levelname)-8s] "
    "%(reset)s%(blue)s%(name)s %(module)s:%(lineno)d%(reset)s %(message)s"
)

formatter = ColoredFormatter(
    LOG_FORMAT,
    datefmt="%Y-%m-%d %H:%M:%S",
    reset=True,
    no_color=not settings.LOG_COLOR,
    log_colors={
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    },
)

logger = logging.getLogger("retail_ledger")
logger.setLevel(settings.LOG_LEVEL)
logger.propagate = False

# one handler even if the module is reloaded
if not any(getattr(h, "_retail_ledger", False) for h in logger.handlers):
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    handler._retail_ledger = True
    logger.addHandler(handler)
