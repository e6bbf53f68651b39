# Copyright (c) 2022 Alethea Katherine Flowers.
# Published under the standard MIT License.
# Full text available at: https://opensource.org/licenses/MIT

import io

import pytest
import rich.console

from flatbread import _print


@pytest.fixture(autouse=True)
def console():
    buf = io.StringIO()
    _print.set_stderr_console(rich.console.Console(file=buf, width=200))
    _print.set_verbose(0)
    _print.set_timing(False)

    yield buf

    _print.set_verbose(0)
    _print.set_timing(False)
