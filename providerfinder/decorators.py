import functools
import click
import sys
from .cli_logger import logger
from .errors import ResolutionError

def handle_exceptions(func):
    """A decorator to handle common exceptions for CLI commands."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.Abort:
            logger.warning("\nCommand aborted by user.")
        except (click.exceptions.Exit, click.ClickException):
            raise
        except ResolutionError as e:
            logger.error(f"Resolution failed: {e}")
            sys.exit(1)
        except FileNotFoundError as e:
            logger.error(f"Error: File not found - {e}")
            logger.exception(*sys.exc_info())
        except Exception as e:
            logger.error(f"\nAn unexpected error occurred: {e}")
            logger.exception(*sys.exc_info())
    return wrapper
