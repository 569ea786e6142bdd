"""Network log collector that writes received messages to its outputs."""

from __future__ import annotations

import enum
import socket
import sys
import threading
from dataclasses import dataclass
from typing import IO

MAX_LISTEN = 5
BUFFER_SIZE = 2048


class OutputMode(enum.IntEnum):
    """Kind of destination a logger writes to."""

    FILE = 0
    SOCKET = 1


@dataclass(frozen=True)
class Output:
    """One destination: a file name, or a host name with a port."""

    mode: OutputMode
    name: str
    port: int = 0


def _decode_message(data: bytes) -> str:
    """Turn one received chunk into a message, dropping its final character."""
    text = data.split(b"\0", 1)[0][:-1]
    return text.decode("utf-8", errors="replace")


class Logger:
    """Listens on a TCP port and copies each received message to its outputs.

    Messages arrive on client connections, are collected into batches at a
    fixed interval and then written, one per line, to every file output.
    A client that sends ``exit`` has its connection closed.
    """

    COLLECT_INTERVAL = 1.0
    POLL_INTERVAL = 0.2

    def __init__(self, tag, port, rotation, filter, nofilter, outputs):
        self.tag = tag
        self.port = int(port)
        self.rotation = bool(rotation)
        self.filter = filter
        self.nofilter = nofilter
        self.outputs: list[Output] = list(outputs)

        self._stop_event = threading.Event()
        self._ready = threading.Condition(threading.Lock())
        self._incoming: list[str] = []
        self._pending: list[str] = []
        self._listen_socket: socket.socket | None = None
        self._handles: list[IO[str]] = []
        self._threads: list[threading.Thread] = []
        self._clients: list[threading.Thread] = []
        self._clients_lock = threading.Lock()
        self._running = False

    @property
    def running(self) -> bool:
        """Whether the logger has been started and not yet stopped."""
        return self._running

    @property
    def bound_port(self) -> int:
        """The port the listening socket is bound to."""
        if self._listen_socket is None:
            raise RuntimeError("logger is not running")
        return self._listen_socket.getsockname()[1]

    def add_output(self, mode, name, port):
        """Add a destination; it takes effect the next time the logger starts."""
        self.outputs.append(Output(OutputMode(mode), name, int(port)))

    def start(self):
        """Bind the listening socket, open the outputs and start the workers."""
        if self._running:
            raise RuntimeError(f"logger {self.tag!r} is already running")
        print(f"Called Constructor for tag={self.tag} with port={self.port}")
        listen_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            listen_socket.bind(("", self.port))
            listen_socket.listen(MAX_LISTEN)
            listen_socket.settimeout(self.POLL_INTERVAL)
        except OSError:
            listen_socket.close()
            raise
        self._listen_socket = listen_socket

        try:
            self._handles = [
                open(output.name, "w", encoding="utf-8")
                for output in self.outputs
                if output.mode is OutputMode.FILE
            ]
        except OSError:
            for handle in self._handles:
                handle.close()
            self._handles = []
            listen_socket.close()
            self._listen_socket = None
            raise

        self._stop_event.clear()
        self._threads = [
            threading.Thread(target=self._listen, name=f"{self.tag}-listener", daemon=True),
            threading.Thread(target=self._collect, name=f"{self.tag}-collector", daemon=True),
            threading.Thread(target=self._write, name=f"{self.tag}-writer", daemon=True),
        ]
        self._running = True
        for thread in self._threads:
            thread.start()
        return self

    def stop(self):
        """Stop the workers, write what is still queued and close the outputs."""
        if not self._running:
            return
        self._stop_event.set()
        with self._ready:
            self._ready.notify_all()
        listener, collector, writer = self._threads
        listener.join()
        with self._clients_lock:
            clients = list(self._clients)
        for client in clients:
            client.join()
        collector.join()
        writer.join()

        with self._ready:
            remaining = self._pending + self._incoming
            self._pending = []
            self._incoming = []
        self._write_batch(remaining)

        for handle in self._handles:
            handle.close()
        self._handles = []
        if self._listen_socket is not None:
            self._listen_socket.close()
            self._listen_socket = None
        self._threads = []
        self._clients = []
        self._running = False

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return None

    def _listen(self) -> None:
        assert self._listen_socket is not None
        while not self._stop_event.is_set():
            try:
                connection, _ = self._listen_socket.accept()
            except socket.timeout:
                continue
            except OSError as error:
                print(f"ERROR on accept: {error}", file=sys.stderr)
                break
            connection.settimeout(self.POLL_INTERVAL)
            client = threading.Thread(
                target=self._serve_client,
                args=(connection,),
                name=f"{self.tag}-client",
                daemon=True,
            )
            with self._clients_lock:
                self._clients.append(client)
            client.start()

    def _serve_client(self, connection: socket.socket) -> None:
        with connection:
            while not self._stop_event.is_set():
                try:
                    data = connection.recv(BUFFER_SIZE)
                except socket.timeout:
                    continue
                except OSError as error:
                    print(f"ERROR reading from socket: {error}", file=sys.stderr)
                    break
                if not data:
                    break
                message = _decode_message(data)
                if message == "exit":
                    break
                with self._ready:
                    self._incoming.append(message)

    def _collect(self) -> None:
        while not self._stop_event.wait(self.COLLECT_INTERVAL):
            with self._ready:
                if self._incoming:
                    self._pending.extend(self._incoming)
                    self._incoming.clear()
                    self._ready.notify_all()

    def _write(self) -> None:
        while True:
            with self._ready:
                while not self._pending and not self._stop_event.is_set():
                    self._ready.wait()
                if not self._pending:
                    return
                batch, self._pending = self._pending, []
            self._write_batch(batch)

    def _write_batch(self, batch: list[str]) -> None:
        if not batch:
            return
        for handle in self._handles:
            for message in batch:
                handle.write(f"{message}\n")
            handle.flush()