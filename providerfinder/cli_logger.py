import datetime
import sys
import traceback
import os
from colorama import Fore, Style, init

# Initialize Colorama
init(autoreset=True)

LOG_DIR = os.environ.get(
    "PROVIDERFINDER_LOG_DIR",
    os.path.join(os.path.expanduser("~"), ".providerfinder", "logs"),
)


class Logger:
    def __init__(self, log_dir=LOG_DIR, verbose=None):
        # Nothing touches the disk until the first record is written.
        self.log_dir = log_dir
        self.log_file = os.path.join(
            log_dir,
            f"providerfinder_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )
        if verbose is None:
            verbose = bool(os.environ.get("PROVIDERFINDER_DEBUG"))
        self.verbose = verbose

    def _get_timestamp(self):
        return datetime.datetime.now().strftime("%H:%M:%S")

    def _log(self, level, message, color, stream=sys.stdout, prefix="", echo=True):
        timestamp = self._get_timestamp()
        log_message = f"[{timestamp}] [{level}] {message}\n"
        if echo:
            print(f"{color}{Style.BRIGHT}[{timestamp}]{Style.RESET_ALL} {prefix}{message}{Style.RESET_ALL}", file=stream)

        os.makedirs(self.log_dir, exist_ok=True)
        with open(self.log_file, "a") as f:
            f.write(log_message)

    def info(self, message):
        self._log("INFO", message, Fore.CYAN)

    def success(self, message):
        self._log("SUCCESS", message, Fore.GREEN, prefix=f"{Style.BRIGHT}✓ {Style.RESET_ALL}{Fore.GREEN}")

    def warning(self, message):
        self._log("WARNING", message, Fore.YELLOW, stream=sys.stderr,
                  prefix=f"{Style.BRIGHT}⚠ {Style.RESET_ALL}{Fore.YELLOW}")

    def error(self, message):
        self._log("ERROR", message, Fore.RED, stream=sys.stderr,
                  prefix=f"{Style.BRIGHT}✖ {Style.RESET_ALL}{Fore.RED}")

    def debug(self, message):
        # Lookup traces always reach the log file, the console only in verbose mode.
        self._log("DEBUG", message, Fore.WHITE + Style.DIM, echo=self.verbose)

    def found(self, value):
        """Trace the outcome of a single key lookup."""
        if value is not None:
            self.debug(f"  found {value}")
        else:
            self.debug("  not found")

    # -------- Exception logging --------
    def exception(self, exc_type, exc_value, exc_traceback):
        self.error(f"An unhandled exception occurred: {exc_value}")
        formatted_lines = traceback.format_exception(exc_type, exc_value, exc_traceback)
        for line in formatted_lines:
            for sub_line in line.splitlines():
                if sub_line.strip():
                    self._log("TRACEBACK", f">> {sub_line}", Fore.RED, stream=sys.stderr)


# ---------------- Helper ----------------
logger = Logger()

def list_log_files(log_dir=None):
    """Return the names of the log files in log_dir, oldest first."""
    log_dir = log_dir or logger.log_dir
    if not os.path.isdir(log_dir):
        return []
    log_files = [f for f in os.listdir(log_dir) if f.endswith(".log")]
    return sorted(log_files, key=lambda f: os.path.getctime(os.path.join(log_dir, f)))

def get_latest_log_file(log_dir=None):
    """Return the path to the latest log file."""
    log_dir = log_dir or logger.log_dir
    log_files = list_log_files(log_dir)
    if not log_files:
        return None
    return os.path.join(log_dir, log_files[-1])
