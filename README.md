# chatroom

A small multi-user chat room served over plain TCP. Connect with any line-based
client such as `nc`, change your nickname, switch channels and see who is
talking.

## Installing

```
pip install .
```

## Running the server

```
chatroom
```

By default the server listens on port 3000 on all IPv4 interfaces, accepts up
to 8 users and calls itself `chat`. These options change that:

| Option    | Meaning                           | Default |
|-----------|-----------------------------------|---------|
| `-p PORT` | TCP port to listen on             | 3000    |
| `-c N`    | maximum number of connected users | 8       |
| `-n NAME` | name of the chat room             | chat    |

For example:

```
chatroom -p 4000 -c 16 -n lobby
```

Option letters may be grouped, each taking the next argument in turn
(`chatroom -pc 4000 16`). Arguments that do not start with `-` and unknown
letters are ignored. The port and user count are read from the leading digits
of their value (`0` when there are none); the port is taken modulo 65536 and
the room name is cut to 127 characters. An option given without a value makes
the command exit with status 2; a user count below 1, or a port that cannot be
opened, makes it exit with status 1. Press Ctrl+C to stop the server; it then
waits for connected users to leave.

Connections, renames, channel changes and disconnects are printed to standard
output as highlighted lines, for example
`127.0.0.1:51234 CONNECTED as anon42`.

## Talking to it

Every new connection gets a random name of the form `anonNNNN` and starts in
the `general` channel. Each turn the server sends any pending notices, one per
line, followed by a prompt such as `anon42@chat general > `, and then reads one
line. Lines beginning with a slash are commands:

- `/nick NAME` changes your nickname (at most 63 characters are kept).
- `/join CHANNEL` moves you to another channel (at most 63 characters are kept).
- `/disconnect` ends the session; the server answers `BYE` and closes the
  connection.

Other slash commands are ignored. Any other line counts as a message: the
sender's nickname is queued for every connected user, including the sender,
and shown before their next prompt.

Once the room holds the maximum number of users, new connections are told that
the server is full and closed.

## What it does not do

- There is no client program; use any raw TCP client.
- The text of a message is not passed on to other users: only the sender's
  nickname is.
- Channels only change what your prompt shows; notices go to every connected
  user whatever their channel.

## Using it from Python

```python
from chatroom.options import ServerOptions, parse_arguments
from chatroom.server import ChatServer

server = ChatServer(parse_arguments(["-p", "4000"]))
server.serve_forever()
```

`ServerOptions` holds `port`, `max_users` and `name`. `ChatServer` exposes
`serve_forever()`, which blocks while admitting users, and `shutdown()`, which
stops it from another thread. Once listening it sets the `ready` event and
fills in `address` with the bound host and port; `sessions` lists the connected
users as `Session` objects with `name`, `channel` and `connected`.
`broadcast(message)` queues a notice for every connected user.

`chatroom.protocol` holds the parts that are independent of sockets:
`parse_line` turns a received line into an `Instruction` carrying a `Command`
and its argument, and `format_prompt`, `banner` and `format_address` build the
text the server sends and prints.

## Running the tests

```
pip install .[test]
pytest
```