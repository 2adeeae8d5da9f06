# pipex

`pipex` feeds a file through a chain of commands and writes the result to
another file, the way a shell pipeline with redirections would.

## Installation

```
pip install .
```

This installs two commands, `pipex` and `pipex-bonus`. The package has no
dependencies outside the standard library. Install the `test` extra to run the
tests with pytest.

## Two commands

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

This behaves like:

```
< infile cmd1 args | cmd2 args > outfile
```

`pipex` takes exactly four arguments. With any other count it prints
`Error:` and ` Incorrect number of arguments.` to standard error and exits
with status 1. If either command string holds nothing but spaces, it reports
the empty command and exits with status 1 without running anything.

## Any number of commands

```
pipex-bonus infile "cmd1" "cmd2" ... "cmdN" outfile
```

This behaves like:

```
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

`pipex-bonus` needs at least four arguments.

## Here-documents

```
pipex-bonus here_doc LIMITER "cmd1" "cmd2" outfile
```

This behaves like:

```
cmd1 << LIMITER | cmd2 > outfile
```

Here-document mode is chosen whenever the first argument begins with
`here_doc`. It takes exactly two commands (five arguments in all). Lines are
read from standard input, with a `> ` prompt written to standard output before
each read, until a line equal to `LIMITER` or the end of input. The text is
kept in a temporary file that is removed afterwards. The output file is
truncated, as with `>`, not appended to.

## Behaviour

- Each command string is split on spaces, and empty pieces are dropped. There
  is no quoting and no escaping, so `"grep hello world"` runs `grep` with the
  arguments `hello` and `world`.
- A command name that contains a `/` is run directly when that file is
  executable. Otherwise it is looked up in the directories listed in `PATH`.
- When a command cannot be found or started, `<name>: command not a found`
  goes to standard error, that stage counts as exit status 127, and the next
  command reads empty input.
- The output file is created with mode `0644` if it does not exist, and
  truncated if it does.
- If the input file or the output file cannot be opened, `<file>: <reason>`
  is printed to standard error and the exit status is 1.
- The exit status is that of the last command in the pipeline. A last command
  killed by a signal reads as status 0.

## Examples

```
pipex input.txt "grep error" "wc -l" count.txt
pipex-bonus access.log "cut -d, -f1" "sort" "uniq -c" summary.txt
printf 'b\na\nEND\n' | pipex-bonus here_doc END "sort" "cat -n" sorted.txt
```

## Using it from Python

- `pipex.pipeline.split_command(text)` splits a command string on spaces and
  raises `ValueError` when nothing is left.
- `pipex.pipeline.run_pipeline(commands, source, sink, env)` runs a list of
  argument lists from an open file (or descriptor) to another and returns the
  last command's exit status. `CommandNotFoundError` is the exception used
  inside it for commands that cannot be started.
- `pipex.resolve.resolve_command(argv, env)` and
  `pipex.resolve.search_path(directories, name)` find the executable to run.
- `pipex.heredoc.collect_here_doc(limiter, reader, prompt)` reads text up to
  a limiter line.
- `pipex.textops` holds the small string helpers (`split`, `atoi`, `itoa`,
  `strtrim`, `strnstr`, `substr`, `strncmp`) used by the rest.

## What it does not do

`pipex` is not a shell. It has no quoting, variables, globbing, built-in
commands, `&&`/`||`, or redirections other than the input and output files
given on the command line, and here-document mode cannot append to the
output file.