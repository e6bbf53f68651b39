# Copyright (c) 2022 Alethea Katherine Flowers.
# Published under the standard MIT License.
# Full text available at: https://opensource.org/licenses/MIT

"""Console output for the library and the command line tools.

Everything goes to stderr through a rich console so that flattened output
written to stdout stays clean. Messages are prefixed with the name of the
module that printed them, and optionally with the process time.
"""

import inspect
import pathlib
import sys
import threading
import time

import rich.console

_thread_local = threading.local()

_VERBOSE = 0
_TIMING = False


def stderr_console() -> rich.console.Console:
    if not hasattr(_thread_local, "stderr_c"):
        _thread_local.stderr_c = rich.console.Console(file=sys.stderr)
    return _thread_local.stderr_c


def set_stderr_console(console: rich.console.Console):
    """Replaces this thread's console, mostly useful for capturing output."""
    _thread_local.stderr_c = console


def set_verbose(v: int):
    global _VERBOSE
    _VERBOSE = int(v)


def set_timing(t: bool):
    global _TIMING
    _TIMING = t


def _caller_name(frame) -> str:
    module = inspect.getmodule(frame.f_code) if frame is not None else None

    if module is None or not getattr(module, "__file__", None):
        return "unknown"

    return pathlib.Path(module.__file__).stem.lstrip("_")


def print_(*args, **kwargs):
    # print_ <- print/printv/warn <- caller
    caller = inspect.currentframe().f_back.f_back
    label = _caller_name(caller)

    if _TIMING:
        label = f"{time.process_time():5.3f} {label}"

    stderr_console().print(f"[italic]{label}:[/]", *args, **kwargs)


def print(*args, **kwargs):
    print_(*args, **kwargs)


def warn(*args, **kwargs):
    print_("[yellow]Warning:[/yellow]", *args, **kwargs)


def printv(*args, **kwargs):
    if _VERBOSE >= 1:
        print_(*args, **kwargs)


def printvv(*args, **kwargs):
    if _VERBOSE >= 2:
        print_(*args, **kwargs)
