"""The receiving end: rebuilds messages from SIGUSR1/SIGUSR2 bits and prints them."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from typing import Callable, TextIO

from .bits import BitDecoder
from .fmt import printf

KillFunc = Callable[[int, int], None]


class Server:
    """Decodes bits sent as signals and acknowledges each one to its sender."""

    def __init__(self, out: TextIO | None = None, kill: KillFunc | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self._kill = kill if kill is not None else os.kill
        self._decoder = BitDecoder()

    def handle(self, signum: int, sender_pid: int) -> bytes | None:
        """Process one signal from ``sender_pid``; return the message it completes, if any.

        SIGUSR1 carries a 1 bit and SIGUSR2 a 0 bit. Every bit is acknowledged
        with SIGUSR1; a finished message is first confirmed with SIGUSR2.
        """
        if signum == signal.SIGUSR1:
            bit = 1
        elif signum == signal.SIGUSR2:
            bit = 0
        else:
            raise ValueError(f"unexpected signal: {signum}")
        message = self._decoder.feed(bit)
        if message is not None:
            if message:
                self.out.write(message.decode("utf-8", errors="replace") + "\n")
                self.out.flush()
            self._kill(sender_pid, signal.SIGUSR2)
        self._kill(sender_pid, signal.SIGUSR1)
        return message

    def serve(self) -> None:
        """Announce this process's id and handle incoming signals forever."""
        signals = {signal.SIGUSR1, signal.SIGUSR2}
        signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        printf("Welcome to my reality, Adventurer...\n", file=self.out)
        printf("Here's the PID you oh so wanted: %d\n", os.getpid(), file=self.out)
        printf("Now take it, and leave me be Mortal.\n", file=self.out)
        self.out.flush()
        while True:
            info = signal.sigwaitinfo(signals)
            self.handle(info.si_signo, info.si_pid)


def main(argv: list[str] | None = None) -> int:
    """Run the server until interrupted."""
    parser = argparse.ArgumentParser(
        prog="sigtalk-server", description="Receive messages sent as signals."
    )
    parser.parse_args(argv)
    try:
        Server().serve()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())