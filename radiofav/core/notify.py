import logging
import subprocess

logger = logging.getLogger(__name__)


def notify(title: str, body: str):
    try:
        subprocess.Popen(["notify-send", title, body])
    except OSError:
        logger.debug("notify-send unavailable, skipped: %s", title)
