# pypipex

`pypipex` runs two commands joined by a pipe. The first command reads from
an input file, and the second command writes to an output file. The shell
equivalent is:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

To install the test dependencies as well:

```sh
pip install ".[test]"
```

## Command-line use

The command takes exactly four arguments:

```sh
pypipex infile "cmd1 args" "cmd2 args" outfile
```

For example:

```sh
pypipex input.txt "grep error" "wc -l" count.txt
```

You can also run it with `python -m pypipex.pipeline` and the same
arguments.

### How commands are handled

- Each command string is split on spaces.
- A word that begins with a single or double quote runs up to the matching
  quote, or to the end of the string if the quote is never closed. This
  lets you write, for example, `"awk '{print $1}'"`.
- The command name is looked up in the directories listed in `PATH`. The
  first directory that holds an executable file of that name is used.

### Files

- The output file is created with mode `0644`. If it already exists, it is
  truncated.
- If the input file does not exist, pypipex reports an error. It then
  creates an empty input file in its place and removes that file once both
  commands have been started.

### Errors and exit status

- If a command cannot be found, pypipex writes `<name>: command not found`
  to standard error. The other command still runs.
- An empty command string is reported as `Permission denied`.
- If the input or output file cannot be opened, pypipex prints the system
  error and exits with status 1.
- If you give the wrong number of arguments, pypipex prints
  `Wrong nb of arguments` and exits with status 1.
- If the environment is empty, pypipex prints `No environment` and exits
  with status 1.
- Otherwise pypipex exits with status 0 once both commands have finished,
  whatever their own exit statuses were.

## Library use

```python
from pypipex.command import parse_command
from pypipex.resolve import find_executable, search_dirs
from pypipex.pipeline import run_pipeline

parse_command("grep 'hello world' -i")   # ['grep', 'hello world', '-i']
search_dirs({"PATH": "/usr/bin:/bin"})    # ['/usr/bin', '/bin']
find_executable("ls", {"PATH": "/usr/bin:/bin"})   # e.g. '/usr/bin/ls', or None

first, second = run_pipeline(
    "input.txt", "cat", "wc -l", "out.txt", {"PATH": "/usr/bin:/bin"}
)
```

`run_pipeline` returns the exit status of each command:

- A command killed by a signal is reported as 128 plus the signal number.
- A command that could not be found is reported as 127.
- A command that could not be started for any other reason is reported
  as 1.

If a file cannot be opened, `run_pipeline` raises `PipexError`. The
exception carries an `exit_code` attribute. `CommandNotFound` is a subclass
of `PipexError`, with `exit_code` 127 and the command's `name`.

`pypipex.pipeline.open_files(infile, outfile)` opens the two files on its
own. It returns the input and output file descriptors, plus a `created` flag
that is set when the input file had to be created.

### Other helpers

- `pypipex.textutil` provides these string helpers:
  - `atoi`: C-style integer parsing with 32-bit limits.
  - `split`: splits on a single character and drops empty pieces.
  - `trim`: strips the given characters from both ends.
  - `find_within`: substring search within a length limit.
  - `substring`.
- `pypipex.printf` provides `format_string`, `printf` and `number_in_base`.
  The formatter supports the `%c %s %d %i %u %x %X %p` conversions. Any
  other conversion, including `%%`, produces a single `%`.

## What it does not do

pypipex handles exactly one pipe between two commands. It has no support
for the following:

- longer pipelines
- here-documents
- appending to the output file
- shell features such as variable expansion, globbing or backslash escapes
  in command strings

## Running the tests

```sh
pytest
```