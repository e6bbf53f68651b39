# Copyright (c) 2022 Alethea Katherine Flowers.
# Published under the standard MIT License.
# Full text available at: https://opensource.org/licenses/MIT

import nox


@nox.session
def lint(s):
    s.install("flake8")
    s.run("flake8", "flatbread")


@nox.session
def format(s):
    s.install("isort", "black")
    s.run("isort", "flatbread", "tests")
    s.run("black", "flatbread", "tests", "noxfile.py")


@nox.session
def test(s):
    s.install(".[test]")
    s.run("pytest", "tests")
