# minitalk

minitalk is a small message channel between two processes on the same POSIX
machine. It sends data only with the signals `SIGUSR1` and `SIGUSR2`.

Each byte of a message goes out as eight signals, most significant bit first.
`SIGUSR1` is a 0 bit and `SIGUSR2` is a 1 bit. Strings are sent as UTF-8, and
a zero byte marks the end of the message.

The server puts the bits back together into bytes and writes each byte to
standard output as soon as it is complete. When the zero byte arrives, the
server writes a newline and sends `SIGUSR1` back to the sender.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits for
signals until it is interrupted with Ctrl-C:

```
$ minitalk-server
Server ON
Server PID: 12345
```

The server waits with `signal.sigwaitinfo`, so it needs a platform that
provides that call, such as Linux.

From another terminal, send a message. The first argument is the server's PID:

```
$ minitalk-client 12345 "hello there"
Mensagem recebida!
```

The client waits 0.5 ms after each signal. If the server confirms the message
before the last signal has been sent, the client prints `Mensagem recebida!`.
If not, it prints `Erro: Sem resposta do servidor.` and still exits with
status 0.

The client exits with status 1 in these cases:

- it is not given exactly two arguments;
- the PID is not a positive number, in which case it also prints a message to
  standard error;
- the message contains a NUL byte, in which case it also prints a message to
  standard error.

The PID is read like C's `atoi`: leading whitespace is skipped and reading
stops at the first non-digit.

## Library

Everything the commands use is also available as plain functions.

### Protocol

`minitalk.protocol` has these pieces:

- `encode_byte(value)` gives the eight bits of a byte.
- `encode_message(text)` gives every bit of a `str` or `bytes` value followed
  by the terminating zero byte.
- `ByteAssembler` turns bits back into bytes. `feed(bit)` returns the byte
  once eight bits have arrived and `None` before that. `reset()` throws away a
  byte that is only partly received.

```python
from minitalk.protocol import encode_message, ByteAssembler

assembler = ByteAssembler()
received = [b for b in map(assembler.feed, encode_message("hi")) if b is not None]
# received == [104, 105, 0]
```

### The two ends of the channel

- `minitalk.server.Server(output=None, acknowledge=None)` decodes signals.
  `handle(signum, sender_pid)` takes one `SIGUSR1` or `SIGUSR2` as one bit and
  writes completed bytes to `output`, which is a binary stream and defaults to
  stdout. At the end of a message it calls `acknowledge(pid)`, which by default
  sends `SIGUSR1` to the sender. `serve()` prints the banner and handles real
  signals until it is interrupted.
- `minitalk.client.send_message(pid, text, delay=0.0005, kill=None)` sends a
  message. It returns `True` if the message was acknowledged while it was being
  sent. `kill` replaces `os.kill` for delivering the signals.

### Helpers

- `minitalk.printf` has `format_string(fmt, *args)` and
  `printf(fmt, *args, file=None)`. They handle `%c %s %d %i %u %x %X %p %%`,
  with C integer widths. `printf` returns the number of characters it wrote.
  `to_hex(num, upper=False)` and `pointer_repr(address)` are available on
  their own.
- `minitalk.linereader.LineReader(stream, buffer_size=10)` reads a text or
  binary stream in chunks of `buffer_size` and returns lines one at a time,
  each with its newline kept. Use `next_line()`, which returns `None` at the
  end of the stream, or iterate over the reader.
- `minitalk.numbers` has `atoi`, `atol`, `itoa` and `put_number`. They convert
  between decimal text and 32-bit or 64-bit signed integers, wrapping values
  that are out of range.
- `minitalk.strings` has the string helpers `split`, `strtrim`, `substr`,
  `strnstr`, `strncmp`, `memcmp`, `strchr`, `strrchr`, `strlcpy`, `strlcat` and
  `map_indexed`. The search functions return an index, or `None` when nothing
  is found.
- `minitalk.ctype` has `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `is_space`, `to_upper` and `to_lower`, which work on ASCII
  characters or character codes.

## Limitations

- The channel only works between processes on the same machine, and the
  client must be allowed to send signals to the server.
- There is no flow control beyond the fixed delay between signals. If the
  server falls behind, bits can be lost.
- The server keeps a single bit buffer for all senders, so two clients sending
  at the same time will interleave their bits.

## Running the tests

```
pip install ".[test]"
pytest
```