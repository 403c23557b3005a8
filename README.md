# busybin

busybin is a single program that provides a set of small POSIX-style
utilities and a minimal shell. It is a multi-call program: it looks at the
name it was started under and runs the utility of that name. Any other
arguments go to that utility.

## Utilities

| Name       | What it does                                                          |
|------------|-----------------------------------------------------------------------|
| `basename` | Strips leading directories and an optional suffix                     |
| `cat`      | Copies files to standard output                                       |
| `clear`    | Clears the terminal screen and moves the cursor home                  |
| `dirname`  | Prints the directory part of a path                                   |
| `false`    | Exits with status 1                                                   |
| `ln`       | Creates hard links, or symbolic links with `-s` (`-f` replaces the target) |
| `ls`       | Lists directory entries sorted by name (`-l` for the long format)     |
| `mkdir`    | Creates directories (`-p` also creates missing parents)               |
| `rm`       | Removes files (`-r`, `-R` or `-d` for directories)                    |
| `sh`       | A minimal shell: interactive, or `-c` with a command                  |
| `sleep`    | Pauses for a whole, non-negative number of seconds                    |
| `tee`      | Copies standard input to standard output and files (`-a` appends)     |
| `true`     | Exits with status 0                                                   |

Under a name that is not in this table, busybin prints
`Unrecognized command: <name>` to standard output and exits with status 1.
That includes the name `busybin` itself.

Some options are recognised but not supported: `cat -u`, `ln -L`, `ln -P`,
`mkdir -m`, `rm -f`, `rm -i`, `rm -v` and `tee -i` print
`-<option> option is not implemented` and exit with status 1. Any other
unknown option prints `Unrecognized flag: <letter>` and exits with status 1.

The long format of `ls` shows only the file-type part of the mode
(permission bits appear as dashes), the link count, the numeric owner and
group ids, the size, the modification time and the name; symbolic links
are followed by `-> <resolved path>`. Times older than six months show the
year instead of the time of day.

## Installation

Installing the package provides the `busybin` entry point. To use a
utility, make a link to that entry point named after the utility and put
the link on your `PATH`; starting the link runs the utility, for example:

    ln -s "$(command -v busybin)" ~/bin/basename
    basename /dir/file.txt .txt

## Exit statuses

Utilities follow a shared convention: 0 for success, 1 for invalid
arguments, 2 when a given path cannot be used. `ln` additionally exits
with 3 when the link itself cannot be created.

## The shell

Started without arguments, `sh` shows a coloured prompt holding the
working directory and reads commands line by line until `exit` or the end
of input. It knows three built-ins: `cd`, `echo` and `exit`. Any other
command is looked up on `PATH` and run with the shell's working directory
and standard streams. With `-c`, the remaining arguments are joined by
spaces and run as one command; any other option is refused with status 1.

Command lines are split on single spaces only: there is no quoting,
escaping, variable expansion, globbing, redirection or piping. When an
external command exits with a non-zero status or is killed by a signal,
the shell reports it on standard error and its own status is 1.

## Use from Python

Every utility is a function that takes a `busybin.core.Proc` (its
arguments, working directory, environment and binary standard streams)
and returns the exit status; `busybin.core.ExitStatus` names the shared
statuses. The functions live in `busybin.pathnames` (`basename`,
`dirname`), `busybin.simple` (`true`, `false`, `sleep`), `busybin.files`
(`cat`, `ln`, `mkdir`, `rm`, `tee`), `busybin.listing` (`ls`,
`format_date`) and `busybin.shell` (`sh`, `clear`).

`busybin.cli.dispatch` picks the utility from the first argument, just as
the command does from its own name, which makes the utilities easy to run
in memory:

    import io
    from busybin.cli import dispatch
    from busybin.core import Proc

    proc = Proc(args=["basename", "/dir/file.txt", ".txt"], wd="/tmp")
    status = dispatch(proc)
    assert status == 0
    assert proc.stdout.getvalue() == b"file\n"

`busybin.term` provides `sgr` and the `Attribute` codes for building
terminal style sequences, and `strip_escape_codes` for removing them from
text.

## What busybin does not do

There is no `date` utility, and the utilities listed above implement only
the options described here. The shell is not a full command language: it
has no scripting, job control, environment variable handling or
redirection.