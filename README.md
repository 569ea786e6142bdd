# datacomptroller

Data Comptroller is a small log collection server. Each configured *log*
listens on a TCP port. Clients send it text, and it collects the messages
and writes them, one per line, to its output files.

## Installation

```
pip install .
```

## Running

```
datacomptroller --server --file datacomptroller.conf
```

`--file FILE` gives the configuration file. It is required and must exist.
If it is missing, or an option is not recognised, the program prints an error
and the option summary and exits with status 1.

The other options are `--server`, `--update`, `--kill`, `--killall`,
`--status` and `--help`. They are accepted, and `--server`, `--update`,
`--kill`, `--killall` and `--status` print a one-line note of what was asked
for, but they do not change what the program does: it always starts every
valid logger in the configuration file.

The server runs until it is interrupted with Ctrl-C. Every logger is then
stopped, the messages still queued are written, and the output files are
closed. If a logger cannot bind its port or open an output file, the loggers
already started are stopped and the program exits with status 1.

## Configuration file

The file holds plain text. Blank lines and lines that start with `#` are
ignored. Each block starts with a line that reads exactly `log`, followed by
`key:value` lines. The value is everything after the first colon, taken as
written.

```
# application logs
log
tag:app
port:9000
output:/var/log/app.log /tmp/app-copy.log
rotation:yes
instant:no
filter:
nofilter:
```

- `tag`, `port` and `output` are required. A block that lacks any of them is
  printed as a wrong configuration and skipped. If no valid block remains,
  the program exits with status 1.
- `output` is a list of destinations separated by spaces. A plain name is a
  file; it is created, or emptied if it exists, when the logger starts. A
  `host,port` pair is recorded as a socket destination.
- `rotation` and `instant` are `yes`, or they are taken as `no`.

## Sending messages

Connect to a logger's port and send text. Each chunk received (up to 2048
bytes) is one message, with its last character dropped, so a client that
sends `hello\n` logs `hello`. A message that reads `exit` closes the
connection. Received messages are gathered about once a second and then
appended to every file output.

## What it does not do

- Nothing is sent to `host,port` destinations; only file outputs are written.
- `rotation`, `instant`, `filter` and `nofilter` are read and kept on the
  logger, but no rotation or filtering takes place.
- There is no way to update, stop or query a running server from another
  command; stop it with Ctrl-C.

## Library use

```python
from datacomptroller.arguments import read_config
from datacomptroller.validate import validate_records
from datacomptroller.cli import build_logger

records = validate_records(read_config("datacomptroller.conf"))
with build_logger(records[0]) as logger:
    print(logger.bound_port)
    ...
```

- `datacomptroller.arguments`: `parse_arguments(argv)` handles the command
  line and returns the records of the configuration file; `parse_config(lines)`
  and `read_config(path)` parse configuration text. They raise
  `ArgumentError`.
- `datacomptroller.validate`: `validate_records(records)` keeps the valid
  records, normalises `rotation` and `instant`, and raises
  `ConfigurationError` when none remains.
- `datacomptroller.logger`: `Logger(tag, port, rotation, filter, nofilter,
  outputs)` takes a list of `Output(mode, name, port)` values, where `mode` is
  an `OutputMode` (`FILE` or `SOCKET`). `start()` and `stop()` run it, or use
  it as a context manager; `add_output(mode, name, port)` adds a destination
  for the next start. `running` and `bound_port` report its state.
- `datacomptroller.cli`: `parse_outputs(spec)` turns an `output` value into
  `Output` values; `build_logger(record)` makes an unstarted `Logger`;
  `main(argv)` is the `datacomptroller` command.
- `datacomptroller.help`: `help_text()` returns a usage summary and
  `print_help()` prints it.