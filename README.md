# catman

catman is a small command-line package manager. It looks packages up in a
remote package list, shows a package's metadata before installing it, runs
the package's install script, and keeps a record of what has been installed.

catman must be run as root. Run as any other user it prints a message and
exits with status 1.

## Installation

```
pip install .
```

## Usage

```
catman -h | --help            Show the help text
catman -i | --install NAME    Install a package
catman -s | --search QUERY    Search the package list
catman -l | --list            List installed packages
catman -d | --delete NAME     Forget an installed package
```

Flags are matched without regard to case, and `--herp` is accepted as another
name for `--help`. With no arguments, or with an unknown flag, catman prints
the help text. A flag that needs a name but is given none prints
`Error: missing package name` and exits with status 1.

The help text shows catman's version, read from the repository's `VERSION`
file and falling back to `0.0.1 beta` if that cannot be fetched within five
seconds. It also shows the kernel release (from `uname -r`) and the Python
version.

### Installing

`catman --install NAME` downloads `NAME/NAME.cat`, the package's metadata
file, from the repository into the temporary directory. It prints the
package's name, version and description, then asks for confirmation; only `y`
(in any case) goes on. It then downloads `NAME/NAME.sh` and runs it with `sh`.
If the script succeeds, both downloaded files are removed and the package is
recorded in `~/.catman/installed.json`. A package whose name is already
recorded is not recorded again.

### Searching

`catman --search QUERY` fetches the remote package list and prints every line
that contains the query, ignoring case. Entries of the form
`id@version/name` are shown as the name and version; other lines are shown
as they are.

### Listing

`catman --list` prints the number of recorded packages, then each one with its
version and the local time it was installed.

### Deleting

`catman --delete NAME` removes the package from the record of installed
packages.

## What catman does not do

- Deleting a package only removes its record. catman does not remove any
  files that the package's install script put on the system.
- The repository location in `catman.mirrors` (`RAW_BASE`,
  `PACKAGE_LIST_URL`, `VERSION_URL`) is a placeholder and must be set to a
  real package repository before installing or searching can work.

## Metadata files

A `.cat` file is a simple INI-like file:

```
[Metadata]
name = "hello"
version = "1.0"

[Description]
Prints a friendly greeting.
```

`catman.catfile` reads these files:

- `get(path, "Metadata.name")` returns a key's value within a section, with
  surrounding double quotes removed; without a dot the key is looked up
  outside any section. A missing key raises `KeyNotFoundError`.
- `get_section(path, section)` returns a section's lines, skipping blank lines
  and lines starting with `#`.
- `keys(path)`, `values(path)` and `read_all(path)` return every key, every
  value, or every pair across the whole file.
- `is_valid(path)` tells whether the file defines both `name` and `version`.
- `exists(path)` tells whether the path exists.

## The installed-packages record

`catman.registry.PackageRegistry` reads and writes the record, by default
`$HOME/.catman/installed.json`: a JSON array of objects with `name`,
`version` and `installed_at` (Unix time in seconds). It offers `load`,
`save`, `add`, `remove` and `packages`.

## Running the tests

```
pip install .[test]
pytest
```