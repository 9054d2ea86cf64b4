# sigtalk

A tiny messaging pair for processes on the same machine. A server waits
for signals and a client sends it a line of text, one bit per signal:
`SIGUSR1` is a 1 bit and `SIGUSR2` is a 0 bit. The text is sent as
UTF-8, each byte most significant bit first, and a zero byte ends the
message.

The server acknowledges every bit with `SIGUSR1`. When the zero byte
arrives it prints the message on its own line (an empty message is not
printed) and answers with `SIGUSR2`; the client then reports success
and exits.

The commands wait for signals with `signal.sigwaitinfo`, so they need a
platform where Python provides it, such as Linux.

## Installing

```
pip install .
```

## Usage

Start the server in one terminal. It greets you and prints its process
id:

```
sigtalk-server
```

It keeps running until interrupted with Ctrl-C.

From another terminal, send it a message:

```
sigtalk-client <PID> "hello there"
```

The server prints `hello there`. The client prints
`Well done Mortal. You have sent a message` and exits with status 0 once
the server confirms the whole message. It exits with status 1 when:

- it is not given exactly two arguments;
- the PID does not read as a positive number (it is read like `atoi`:
  leading whitespace and a sign are allowed, reading stops at the first
  non-digit);
- the server process cannot be signalled;
- the message contains a NUL character.

## Library

The pieces can be used on their own:

- `sigtalk.bits`: `byte_bits(value)` gives the eight bits of a byte,
  `encode_message(text)` gives all the bits of a message including its
  terminator, and `BitDecoder` rebuilds messages: `feed(bit)` returns the
  message bytes once a terminator completes, `pending` holds the bytes
  received so far and `reset()` discards them.
- `sigtalk.server.Server(out=None, kill=None)` writes finished messages to
  any text stream. `handle(signum, sender_pid)` takes a signal number and
  the sender's PID, sends the acknowledgements through the given `kill`
  callable and returns the completed message, if any, so it can be driven
  without real signals. `serve()` runs the real signal loop.
- `sigtalk.client.Client(pid, kill=None, wait_ack=None)` sends bytes with
  `send_byte(value)` and whole messages with `send(text)`, through any
  `kill` callable, waiting on `wait_ack` for each acknowledgement. It
  raises `ConnectionError` when the server cannot be reached.
  `parse_pid(text)` validates a PID argument and raises `ValueError`
  otherwise.
- `sigtalk.fmt`: `format_message(template, *args)` and
  `printf(template, *args, file=None)` support the conversions
  `%c %d %i %u %s %p %x %X %%`; an unknown conversion, a trailing `%` or
  too few arguments raise `ValueError`.
- `sigtalk.libtext`: small string helpers `atoi`, `itoa`, `split`,
  `strtrim`, `substr`, `strnstr` (returns an index or `None`) and
  `strjoin`.

## Limitations

The server keeps a single decoder for all senders, so it handles one
client at a time; bits from clients sending at once get mixed together.
Nothing is stored: messages are only written to the server's output.

## Tests

```
pip install .[test]
pytest
```