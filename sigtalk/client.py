"""The sending end: sends a message bit by bit as SIGUSR1/SIGUSR2 signals."""

from __future__ import annotations

import os
import signal
import sys
from typing import Callable

from .bits import _message_bytes, byte_bits
from .libtext import atoi

KillFunc = Callable[[int, int], None]
WaitFunc = Callable[[], int]

_ACK_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}


def _signal_waiter() -> WaitFunc:
    """Block the acknowledgement signals and return a function that waits for one."""
    signal.pthread_sigmask(signal.SIG_BLOCK, _ACK_SIGNALS)

    def wait() -> int:
        return signal.sigwaitinfo(_ACK_SIGNALS).si_signo

    return wait


def parse_pid(text: str) -> int:
    """Read a process id; it must be a positive number."""
    pid = atoi(text)
    if pid <= 0:
        raise ValueError(f"invalid process id: {text!r}")
    return pid


class Client:
    """Sends messages to a server process one bit at a time."""

    def __init__(
        self,
        pid: int,
        kill: KillFunc | None = None,
        wait_ack: WaitFunc | None = None,
    ) -> None:
        self.pid = pid
        self._kill = kill if kill is not None else os.kill
        self._wait_ack = wait_ack if wait_ack is not None else _signal_waiter()

    def _check_alive(self) -> None:
        try:
            self._kill(self.pid, 0)
        except OSError as exc:
            raise ConnectionError(f"server process {self.pid} is not reachable") from exc

    def send_byte(self, value: int) -> bool:
        """Send one byte, waiting for an acknowledgement after every bit.

        Returns True if the server confirmed a whole message meanwhile.
        """
        for bit in byte_bits(value):
            self._check_alive()
            self._kill(self.pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
            if self._wait_ack() == signal.SIGUSR2:
                return True
        return False

    def send(self, text: str | bytes) -> int:
        """Send ``text`` with its terminator and wait until the server confirms it.

        Returns the number of message bytes sent.
        """
        data = _message_bytes(text)
        for sent, value in enumerate(data):
            if self.send_byte(value):
                return sent + 1
        if not self.send_byte(0):
            while self._wait_ack() != signal.SIGUSR2:
                pass
        return len(data)


def main(argv: list[str] | None = None) -> int:
    """Send the message given on the command line to the given server process."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        sys.stderr.write("Really? Try it like this: client <PID> <string>\n")
        return 1
    try:
        pid = parse_pid(args[0])
    except ValueError:
        sys.stderr.write("NICE TRY. GO AGAIN FOOL.\n")
        return 1
    try:
        Client(pid).send(args[1])
    except ConnectionError:
        sys.stderr.write("Failed to send PID Signal. Pathetic.\n")
        return 1
    except ValueError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    sys.stdout.write("Well done Mortal. You have sent a message\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())