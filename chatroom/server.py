"""Multi-user chat room served over TCP."""

from __future__ import annotations

import logging
import queue
import random
import socket
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from chatroom.options import ServerOptions, parse_arguments
from chatroom.protocol import (
    DEFAULT_CHANNEL,
    FAREWELL,
    MAX_BUFFER_LEN,
    SERVER_FULL,
    Command,
    banner,
    format_address,
    format_prompt,
    parse_line,
)

logger = logging.getLogger(__name__)

_ACCEPT_POLL_SECONDS = 0.2


@dataclass(eq=False)
class Session:
    """One connected user."""

    connection: socket.socket
    name: str
    channel: str = DEFAULT_CHANNEL
    connected: bool = True
    _inbox: queue.SimpleQueue = field(default_factory=queue.SimpleQueue, repr=False)

    def deliver(self, message: str) -> None:
        """Queue a message for the user's next prompt."""
        self._inbox.put(message)

    def drain(self) -> list[str]:
        """Take every queued message, oldest first."""
        messages = []
        while True:
            try:
                messages.append(self._inbox.get_nowait())
            except queue.Empty:
                return messages


class ChatServer:
    """Accepts users, runs a worker per user and relays messages between them."""

    def __init__(self, options: ServerOptions) -> None:
        self.options = options
        self.sessions: list[Session] = []
        self.ready = threading.Event()
        self.address: tuple[str, int] | None = None
        self._lock = threading.Lock()
        self._running = threading.Event()
        self._running.set()
        self._listener: socket.socket | None = None
        self._pool = ThreadPoolExecutor(max_workers=options.max_users)

    def _announce(self, text: str) -> None:
        sys.stdout.write(banner(text))
        sys.stdout.flush()

    def accept(self, connection: socket.socket, address: tuple) -> Session | None:
        """Admit a new connection, or turn it away when the room is full."""
        session = Session(connection, f"anon{random.randrange(10000)}")
        with self._lock:
            full = len(self.sessions) >= self.options.max_users
            if not full:
                self.sessions.append(session)
        if full:
            try:
                connection.sendall(SERVER_FULL.encode())
            except OSError:
                pass
            connection.close()
            return None
        host, port = address[0], address[1]
        self._announce(f"{format_address(host, port)} CONNECTED as {session.name}")
        self._pool.submit(self.handle, session)
        return session

    def broadcast(self, message: str) -> None:
        """Queue a message for every connected user."""
        with self._lock:
            recipients = list(self.sessions)
        for session in recipients:
            session.deliver(message)

    def handle(self, session: Session) -> None:
        """Serve one user until they leave or the connection drops."""
        farewell = False
        try:
            while session.connected:
                prompt = format_prompt(
                    session.drain(), session.name, self.options.name, session.channel
                )
                session.connection.sendall(prompt.encode())
                data = session.connection.recv(MAX_BUFFER_LEN)
                if not data:
                    break
                instruction = parse_line(data.decode("utf-8", errors="replace"))
                if instruction.command is Command.DISCONNECT:
                    farewell = True
                    break
                if instruction.command is Command.JOIN:
                    session.channel = instruction.argument
                    self._announce(f"{session.name} JOINED {session.channel}")
                elif instruction.command is Command.NICK:
                    self._announce(f"{session.name} RENAMED {instruction.argument}")
                    session.name = instruction.argument
                elif instruction.command is Command.MESSAGE:
                    self.broadcast(session.name)
        except OSError as error:
            logger.debug("connection of %s failed: %s", session.name, error)
        finally:
            session.connected = False
            self._announce(f"{session.name} DISCONNECTED")
            if farewell:
                try:
                    session.connection.sendall(FAREWELL.encode())
                except OSError:
                    pass
            session.connection.close()
            with self._lock:
                if session in self.sessions:
                    self.sessions.remove(session)

    def serve_forever(self) -> None:
        """Listen on the configured port and admit users until shut down."""
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            listener.bind(("", self.options.port))
            listener.listen()
        except OSError:
            listener.close()
            raise
        listener.settimeout(_ACCEPT_POLL_SECONDS)
        self._listener = listener
        self.address = listener.getsockname()[:2]
        self.ready.set()
        try:
            while self._running.is_set():
                try:
                    connection, address = listener.accept()
                except socket.timeout:
                    continue
                except OSError:
                    if not self._running.is_set():
                        break
                    raise
                connection.settimeout(None)
                self.accept(connection, address)
        finally:
            listener.close()
            self._pool.shutdown(wait=True)

    def shutdown(self) -> None:
        """Stop admitting users and wait for everyone to disconnect."""
        self._running.clear()
        if self._listener is None:
            self._pool.shutdown(wait=True)


def main(argv: list[str] | None = None) -> int:
    """Run the chat server from the command line."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    arguments = sys.argv[1:] if argv is None else argv
    try:
        options = parse_arguments(arguments)
    except ValueError as error:
        logger.error("Error: %s", error)
        return 2
    try:
        server = ChatServer(options)
    except ValueError:
        logger.error("Error: Failed to create thread pool!")
        return 1
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        server.shutdown()
    except OSError:
        logger.error("Error: Failed to create socket!")
        return 1
    return 0