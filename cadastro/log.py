# cadastro/log.py
#
# Shared application logger with elapsed time.
#
# Design decisions:
#   - Single log() function used by services, startup and auth.
#   - Elapsed time since process start is shown so the operator can relate
#     log lines to uptime.
#   - Plain stdout with flush, no logging handlers to configure.
#   - Callers never pass a full CPF: use CPF.mascarado.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[cadastro {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
