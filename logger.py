# logger.py

import time
import constants as C

# Reference point for the elapsed-time stamp on every message.
_start_time = time.perf_counter()
_verbose = C.LOG_VERBOSE

def reset_clock():
    """Restarts the elapsed-time counter used in message timestamps."""
    global _start_time
    _start_time = time.perf_counter()

def set_verbose(flag):
    """Turns per-node debug messages on or off."""
    global _verbose
    _verbose = bool(flag)

def is_verbose():
    return _verbose

def log(message):
    """Prints a message prefixed with the seconds elapsed since the clock started."""
    elapsed = time.perf_counter() - _start_time
    time_str = f"[+{elapsed:.{C.LOG_TIME_PRECISION}f}s]"
    print(f"{time_str} {message}")

def debug(message):
    """Like log(), but only when verbose mode is on."""
    if _verbose:
        log(f"DEBUG: {message}")
