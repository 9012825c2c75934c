import asyncio
import curses
import logging
import os
import signal
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

log = logging.getLogger(__name__)

ESC = 0x1B
_READ_SIZE = 1024


class TerminalError(Exception):
    pass


@dataclass(frozen=True)
class Key:
    char: str
    ctrl: bool = False
    alt: bool = False


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


TerminalEvent = Union[Key, Resize]


def decode_keys(data: bytes) -> List[Key]:
    # bytes 1-26 are Control+letter; escape sequences and non-ASCII are skipped
    keys: List[Key] = []
    alt = False
    i = 0
    while i < len(data):
        byte = data[i]
        if byte == ESC:
            i += 1
            alt = False
            if i < len(data) and data[i] in b"[O":
                i += 1
                while i < len(data) and not 0x40 <= data[i] <= 0x7E:
                    i += 1
                i += 1
            else:
                # ESC before a plain byte is the Alt prefix
                alt = True
            continue
        if 1 <= byte <= 26:
            keys.append(Key(chr(byte + 96), ctrl=True, alt=alt))
        elif 32 <= byte < 127:
            keys.append(Key(chr(byte), alt=alt))
        alt = False
        i += 1
    return keys


def _terminal_size(fd: int) -> Tuple[int, int]:
    try:
        size = os.get_terminal_size(fd)
    except OSError as exc:
        raise TerminalError(f"cannot read terminal size: {exc}") from exc
    return size.columns, size.lines


class Screen:
    def __init__(self, stdscr, fd: Optional[int] = None) -> None:
        self.stdscr = stdscr
        self.fd = sys.__stdout__.fileno() if fd is None else fd

    def size(self) -> Tuple[int, int]:
        cols, rows = _terminal_size(self.fd)
        try:
            if curses.is_term_resized(rows, cols):
                curses.resizeterm(rows, cols)
        except curses.error as exc:
            raise TerminalError(f"cannot resize screen: {exc}") from exc
        return cols, rows

    def clear(self) -> None:
        self.stdscr.erase()

    def write(self, x: int, y: int, text: str) -> None:
        rows, cols = self.stdscr.getmaxyx()
        if y < 0 or y >= rows:
            return
        if x < 0:
            text = text[-x:]
            x = 0
        text = text[: max(0, cols - x)]
        if not text:
            return
        try:
            self.stdscr.addstr(y, x, text)
        except curses.error as exc:
            # curses reports an error after filling the bottom-right cell
            if y == rows - 1 and x + len(text) == cols:
                return
            raise TerminalError(f"cannot write to terminal: {exc}") from exc

    def flush(self) -> None:
        try:
            self.stdscr.refresh()
        except curses.error as exc:
            raise TerminalError(f"cannot write to terminal: {exc}") from exc


def _restore(stdscr) -> None:
    steps = (
        ("noraw", curses.noraw),
        ("echo", curses.echo),
        ("cursor", lambda: curses.curs_set(1)),
        ("endwin", curses.endwin),
    )
    for name, step in steps:
        try:
            step()
        except curses.error as exc:
            log.debug("restore step %s failed: %s", name, exc)
    sys.stdout.write("\x1b[?1049l")
    sys.stdout.flush()


@contextmanager
def terminal_session() -> Iterator[Screen]:
    try:
        stdscr = curses.initscr()
    except curses.error as exc:
        raise TerminalError(f"cannot initialise terminal: {exc}") from exc
    sys.stdout.write("\x1b[?1049h")
    sys.stdout.flush()
    log.debug("terminal session entered")
    try:
        curses.noecho()
        curses.raw()
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        yield Screen(stdscr)
    except curses.error as exc:
        raise TerminalError(str(exc)) from exc
    finally:
        _restore(stdscr)
        log.debug("terminal session restored")


class TerminalInput:
    # keys from stdin and SIGWINCH resizes; next() gives None once stdin closes

    def __init__(self, fd: Optional[int] = None, size_fd: Optional[int] = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.size_fd = sys.__stdout__.fileno() if size_fd is None else size_fd
        self._queue: asyncio.Queue = asyncio.Queue()
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._reading = False
        self._closed = False

    def start(self) -> None:
        self._loop = asyncio.get_running_loop()
        self._loop.add_reader(self.fd, self._on_readable)
        self._reading = True
        self._loop.add_signal_handler(signal.SIGWINCH, self._on_resize)

    def close(self) -> None:
        if self._loop is None:
            return
        self._stop_reading()
        self._loop.remove_signal_handler(signal.SIGWINCH)
        self._loop = None

    def _stop_reading(self) -> None:
        if self._reading and self._loop is not None:
            self._loop.remove_reader(self.fd)
        self._reading = False

    def _on_readable(self) -> None:
        try:
            data = os.read(self.fd, _READ_SIZE)
        except OSError as exc:
            self._stop_reading()
            self._queue.put_nowait(TerminalError(f"cannot read terminal input: {exc}"))
            return
        if not data:
            self._stop_reading()
            self._queue.put_nowait(None)
            return
        for key in decode_keys(data):
            log.debug("key %r ctrl=%s alt=%s", key.char, key.ctrl, key.alt)
            self._queue.put_nowait(key)

    def _on_resize(self) -> None:
        try:
            width, height = _terminal_size(self.size_fd)
        except TerminalError as exc:
            self._queue.put_nowait(exc)
            return
        self._queue.put_nowait(Resize(width, height))

    async def next(self) -> Optional[TerminalEvent]:
        if self._closed:
            return None
        item = await self._queue.get()
        if isinstance(item, TerminalError):
            raise item
        if item is None:
            self._closed = True
        return item
