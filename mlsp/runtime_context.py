from __future__ import annotations
import sys
from typing import Optional, TextIO

# NOTE: process-global, like the rest of the runtime. `print` writes here.
_output: Optional[TextIO] = None


def set_output(stream: Optional[TextIO]) -> None:
    global _output
    _output = stream


def get_output() -> TextIO:
    # Resolved at call time so a redirected sys.stdout is honoured.
    return _output if _output is not None else sys.stdout
