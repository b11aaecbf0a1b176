# pipex

`pipex` runs two commands connected by a pipe, taking the first command's
input from a file and writing the second command's output to another file.
It behaves like the shell line

    < infile cmd1 | cmd2 > outfile

## Installation

    pip install .

## Usage

    pipex infile "cmd1 args" "cmd2 args" outfile

For example:

    pipex input.txt "grep error" "wc -l" count.txt

The same can be started with `python -m pipex.pipeline ...`.

Exactly four arguments are required, and none of them may be empty;
otherwise `pipex` exits with status 1 without printing anything.

Each command string is split on spaces, with empty pieces dropped; no
quoting rules apply. A command name containing a `/` is used as a path as
given. Any other name is looked up in the directories listed in `PATH`:
the first directory holding an executable file of that name wins, and the
search stops with "Permission denied" as soon as a matching file is found
that is not executable.

The output file is created with mode 0644 if needed and truncated. A file
that cannot be opened is reported on standard error as `path: reason`.
If the input file cannot be opened, the first command is not started; if
the output file cannot be opened, the second command is not started.
Problems with the first command are reported but never stop the second.

## Exit status

The exit status is that of the second command:

- `127` when the command cannot be found ("Command not found"),
- `126` when it exists but cannot be executed ("Permission denied"), or
  when starting it fails ("Error execve: ..."),
- `1` for usage errors, an output file that cannot be opened, a missing
  `PATH`, or a command ended by a signal,
- otherwise the command's own exit status.

## Library use

```python
from pipex.pipeline import run_pipeline, validate_args, UsageError
from pipex.resolve import resolve_command, CommandNotFound

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
path, argv = resolve_command("ls -l", {"PATH": "/usr/bin:/bin"})
```

- `pipex.pipeline`: `run_pipeline(infile, cmd1, cmd2, outfile, env=None)`
  returns the exit status described above. `env` may be a mapping or a
  list of `KEY=VALUE` strings; when omitted, the current environment is
  used. `validate_args(args)` returns the four arguments or raises
  `UsageError`. `open_input` and `open_output` open the files as
  described above. `main(argv=None)` is the command entry point.
- `pipex.resolve`: `resolve_command(command, env)` returns
  `(path, argv)` or raises `CommandNotFound` (status 127),
  `CommandPermissionDenied` (status 126) or a plain `CommandError`
  (status 1, when `PATH` is not set). Each error carries `message` and
  `exit_status`. Also provided: `has_slash`, `search_path` and
  `find_in_path`.
- `pipex.textutils`: small string helpers (`split`, `env_lookup`, `atoi`,
  `itoa`, `strtrim`, `substr`, `strnstr`, `strncmp`, `strchr`, `strrchr`).
  The search helpers return indexes, or `None` when nothing is found.

## Limitations

Only two commands are supported; there is no here-document mode and no
chaining of more than two commands. Command strings are not parsed as a
shell would parse them.

## Running the tests

    pip install .[test]
    pytest