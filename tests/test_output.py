import os

import pytest

from sigtalk.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    closed = []

    def collect():
        os.close(write_fd)
        closed.append(True)
        chunks = []
        while True:
            chunk = os.read(read_fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    yield write_fd, collect
    if not closed:
        os.close(write_fd)
    os.close(read_fd)


def test_putchar_fd(pipe):
    fd, collect = pipe
    assert putchar_fd("A", fd) == 1
    putchar_fd(ord("\n"), fd)
    assert collect() == b"A\n"


def test_putchar_fd_rejects_long_string(pipe):
    fd, _ = pipe
    with pytest.raises(ValueError):
        putchar_fd("AB", fd)


def test_putstr_fd(pipe):
    fd, collect = pipe
    text = "Writing to a file."
    assert putstr_fd(text, fd) == len(text)
    assert collect() == text.encode()


def test_putstr_fd_none_writes_nothing(pipe):
    fd, collect = pipe
    assert putstr_fd(None, fd) == 0
    assert collect() == b""


def test_putendl_fd(pipe):
    fd, collect = pipe
    first = "Bonjour, monde !"
    second = "Ceci est un test."
    assert putendl_fd(first, fd) == len(first) + 1
    assert putendl_fd(second, fd) == len(second) + 1
    assert collect().split(b"\n") == [b"Bonjour, monde !", b"Ceci est un test.", b""]


def test_putendl_fd_none(pipe):
    fd, collect = pipe
    assert putendl_fd(None, fd) == 0
    assert collect() == b""


def test_putnbr_fd_source_values(pipe):
    fd, collect = pipe
    counts = [putnbr_fd(n, fd) for n in (42, -1234, 0, -2147483648)]
    assert counts == [2, 5, 1, 11]
    assert collect() == b"42-12340-2147483648"


@pytest.mark.parametrize("n", [7, -9, 2147483647, -2147483648])
def test_putnbr_fd_round_trip(pipe, n):
    fd, collect = pipe
    written = putnbr_fd(n, fd)
    data = collect()
    assert written == len(data)
    assert int(data) == n