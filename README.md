# temprecycle

An interactive console tool. It scans the folder named by the `TEMP`
environment variable, reports how many files and folders that folder holds
and how much space they take, and offers to clean it up.

## Installation

```
pip install .
```

## Usage

```
temprecycle
```

The tool clears the screen, shows its logo and asks:

```
Push (E) to scan. (N) to cancel
>
```

- `E` scans `TEMP` recursively. Progress bars show files and folders as
  they are counted. Protected files are reported and left out of the
  totals. A file is protected when its name starts with a dot, or when the
  platform reports it as hidden or system. A summary line follows, for
  example:

  ```
  [ Total Files: 42 | Folders: 7 | Size: 3.25 MB ]
  ```

- `N` cancels, and the exit status is 1.
- An empty answer is reported as an error, and the exit status is 1. Any
  other answer is reported as a failed operation.

After the scan, answer `Y` to go on to cleaning, and then confirm once more
with `Y`. Every regular file that is not protected is deleted. Folders that
are empty when they are checked are then removed. Symbolic links to
directories are not followed. Each deletion is reported, and so is each
failed one.

If `TEMP` is not set, the tool reports `TEMP is null` and exits with
status 1.

Colours and cursor positioning are written as ANSI escape sequences.

## Using it from Python

```python
from temprecycle.scanner import scan_directory
from temprecycle.sizes import format_bytes

result = scan_directory("/tmp")
print(result.file_count, result.folder_count, format_bytes(result.total_size))
print(result.summary)
```

`scan_directory` returns a `ScanResult` with these members:

- `files`, `folders`, `protected` and `failed`, which are lists of paths
- `file_count` and `total_size`, which cover the files that were counted
- `folder_count`
- `summary`

`scan_directory` raises `OSError` if the root cannot be listed.
`is_protected(path)` tells whether the scan and the cleanup will skip a
file.

`format_bytes` gives two decimal places, in units from B up to TB. For
example, `format_bytes(1536)` returns `"1.50 KB"`. A negative count raises
`ValueError`.

`temprecycle.cleaner.delete_unprotected(path)` carries out the cleanup
without asking. It returns a `CleanupReport` whose `deleted_files`,
`deleted_folders` and `errors` list what was removed and what failed.

`temprecycle.cli.run(environ, stdin, stdout)` runs one session against the
given environment mapping and streams, and returns the exit status.

## Running the tests

```
pip install .[test]
pytest
```