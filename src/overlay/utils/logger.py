"""Global logging and error handling utilities"""
import sys
import logging
import traceback

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_logger = logging.getLogger('overlay')


def setup_logging(verbose: bool = False):
    """Configure root logging for command-line entry points

    Args:
        verbose: Log at DEBUG level instead of WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with a logged report in release mode
    
    Args:
        e: The exception to handle
        user_message: User-friendly message to log (optional)
        title: Heading for the logged report
    
    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)
    
    In RELEASE_MODE:
        - Logs the full traceback
        - Logs the user message or exception string
        - Then raises the exception
    """
    if DEBUG_MODE:
        raise e

    tb = traceback.format_exc()
    _logger.error(f"{title}: {tb}")

    message = user_message if user_message else str(e)
    _logger.error(f"{title} - {message}")

    raise e
