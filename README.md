# sigtalk

`sigtalk` sends a text message from one process to another with POSIX
signals alone. Each byte is sent as eight signals, most significant bit first.
`SIGUSR1` carries a 0 bit and `SIGUSR2` carries a 1 bit. The server answers
each bit with `SIGUSR1`. When the terminating zero byte arrives, the server
prints the message it has put together on a line of its own and answers with
`SIGUSR2`. The client then reports success and exits.

Only POSIX systems are supported. The server waits for signals with
`signal.sigwaitinfo`. Python provides that call on Linux but not on macOS.

## Installation

```
pip install .
```

## Usage

Start the server. It first prints its process id:

```
$ sigtalk-server
server PID : 4242
```

From another terminal, send that process a message:

```
$ sigtalk-client 4242 "hello there"
Message successfully received by the server, exiting...
```

The server prints `hello there`. Press Ctrl-C to stop the server. It exits
with status 2, the number of `SIGINT`.

The client takes exactly two arguments, `<PID> <message>`. It exits with
status 1 in these cases:

- the number of arguments is wrong (it also prints a usage line on standard
  error);
- the PID does not parse to a positive number (it prints `Invalid PID`);
- sending a signal fails, for example because no process has that id.

The message goes over the wire as UTF-8.

## Library use

The commands are built from parts you can import:

- `sigtalk.protocol.encode_byte(value)` returns the eight bits of one byte.
- `sigtalk.protocol.encode_message(data)` yields the bits of a `str` or of
  bytes, followed by the terminating zero byte. Data that already holds a zero
  byte raises `ValueError`.
- `sigtalk.protocol.Receiver` puts a bit stream back together.
  `Receiver.feed_bit(bit)` returns the finished message as `bytes` when its
  terminator completes, and `None` otherwise.
- `sigtalk.protocol.parse_pid(text)` reads a process id leniently: leading
  whitespace and a sign are allowed, and trailing text is ignored. It raises
  `ValueError` unless the result is positive.
- `sigtalk.client.send_message(pid, message)` sends a message and waits for an
  acknowledgement after every bit. It returns `True` once the server confirms
  that the whole message arrived. It installs signal handlers, so it must be
  called from the main thread.
- `sigtalk.server.Server(out)` writes each finished message to `out`, which is
  standard output by default. `Server.handle(signum, sender_pid)` processes one
  incoming signal, sends the acknowledgements and returns the message when one
  completed. `Server.serve_forever()` prints the PID and then handles signals
  until it is interrupted.

The package also includes small helpers:

- `sigtalk.chars`: ASCII character tests and case conversion (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`, `toupper`).
- `sigtalk.memory`: byte-buffer operations on bytearrays (`bzero`, `memset`,
  `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`).
- `sigtalk.search`: search and bounded copying on NUL-terminated strings
  (`strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`,
  `strdup`).
- `sigtalk.transform`: `atoi`, `itoa`, `split`, `substr`, `strjoin`,
  `strtrim`, `strmapi`, `striteri`.
- `sigtalk.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`
  write to raw file descriptors.
- `sigtalk.linkedlist`: `LinkedList`, a singly linked list of `Node`s, with
  `push_front`, `push_back`, `last`, `for_each`, `map` and `clear`.
- `sigtalk.cformat`: `cformat(fmt, *args)` and `cprint(fmt, *args)` do
  printf-style formatting with `%c %s %p %d %i %u %x %X %%`.

## Limitations

- The server keeps a single receive state. Two clients that send at the same
  time will garble each other's messages.
- Messages go one way only. The server stores nothing, and after printing a
  message it does not keep it.
- There is no authentication. Any process that may signal the server can send
  it bits.

## Tests

```
pip install .[test]
pytest
```