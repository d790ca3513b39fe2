#!.venv/bin/python

# The shebang may point towards a venv, but CI executes python -m runtest

import os
import shutil
import subprocess
import sys
import traceback
import unittest

from test.runtime import detect_capabilities, ProgressResult, StyledStream


if __name__ == "__main__":
    stream = sys.stdout
    styled = StyledStream(stream, detect_capabilities())

    def println(s: str = "") -> None:
        if s:
            stream.write(s)
        stream.write("\n")
        stream.flush()

    println(styled.h1("1. Setup"))
    println(styled.h2("Python"))
    println(f"{sys.executable}")
    println(styled.h2("Terminal"))
    println(os.environ.get("TERM", "n/a"))
    println(styled.h2("Current Directory"))
    println(f"{os.getcwd()}")

    println(styled.h1("2. Type Checking"))
    if shutil.which("pyright") is None:
        println(styled.light("pyright is not installed; skipping"))
    else:
        try:
            subprocess.run(["pyright", "termcaps"], check=True)
        except subprocess.CalledProcessError:
            println(styled.failure("termcaps failed to type check!"))
            sys.exit(1)

    println(styled.h1("3. Unit Testing"))
    try:
        runner = unittest.main(
            module="test",
            exit=False,
            testRunner=unittest.TextTestRunner(
                stream=stream, resultclass=ProgressResult
            ),
        )
        sys.exit(not runner.result.wasSuccessful())
    except Exception as x:
        trace = traceback.format_exception(x)
        println("".join(trace[:-1]))
        println(styled.err(trace[-1]))
        sys.exit(1)
