from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """Whole-line prompts on a pair of text streams (stdin/stdout by default)."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise EOFError("input closed")
        return line.rstrip("\r\n")
