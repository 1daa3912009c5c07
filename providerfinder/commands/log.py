import click
import os
import sys
from colorama import Fore, Style
from ..cli_logger import logger, get_latest_log_file, list_log_files

LEVEL_COLORS = {
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "DEBUG": Fore.WHITE + Style.DIM,
    "SUCCESS": Fore.GREEN,
    "TRACEBACK": Fore.RED,
    "INFO": Fore.CYAN,
}


def _record_level(line):
    """Return the level of a '[HH:MM:SS] [LEVEL] message' record, or None."""
    parts = line.split("] [", 1)
    if len(parts) != 2 or "]" not in parts[1]:
        return None
    return parts[1].split("]", 1)[0]


@click.command()
@click.option('--filename', default=None, help='The name of the log file to display.')
@click.option('--list', 'list_files', is_flag=True, help='List all log files.')
@click.option('--level', type=click.Choice(sorted(LEVEL_COLORS), case_sensitive=False), default=None,
              help='Only show records of this level.')
def log(filename, list_files, level):
    """Display the latest or a named log file, or list all log files."""
    log_dir = logger.log_dir
    if list_files:
        log_files = list_log_files(log_dir)
        if not log_files:
            click.echo(f"No log files found in {log_dir}.")
            return
        click.echo(f"Available log files in {log_dir}:")
        for f in log_files:
            click.echo(f"  {f}")
        return

    log_file = os.path.join(log_dir, filename) if filename else get_latest_log_file(log_dir)
    if not log_file or not os.path.exists(log_file):
        click.echo(f"No log files found in {log_dir}.")
        return

    click.echo(f"Displaying log file: {log_file}")
    try:
        with open(log_file, 'r') as f:
            for line in f:
                record_level = _record_level(line)
                if level and record_level != level.upper():
                    continue
                color = LEVEL_COLORS.get(record_level, Fore.CYAN)
                click.echo(f"{color}{line.rstrip()}{Style.RESET_ALL}")
    except IOError as e:
        sys.stderr.write(f"Error reading log file {log_file}: {e}\n")
        click.echo("Please check file permissions.")
