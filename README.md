# chaining

Small, self-contained examples of transforming data with comprehensions,
generators, `map`, `zip`, `itertools.pairwise` and `asyncio`. Many examples
also show the same task written as a plain `for` loop. Each module has its
own mock data, so every example can run without any setup.

## Modules

- `chaining.full_names`: turns `NetworkUser(first_name, last_name)` into
  `DbUser(full_name)`. It does this in four ways: a loop, a mapped inner
  function, a comprehension and `DbUser.from_network_user`. `receive_users()`
  supplies the sample users. `save_users()` prints the users it is given.
- `chaining.ages`: turns `NetworkUser(name, age)`, where the age is text, into
  `DbUser(name, age)`. `parse_age()` accepts whole numbers from 0 to 255 and
  raises `ValueError` for anything else. The functions are:
  - `transform_users()` raises on the first bad age.
  - `very_verbose_transform_and_log_errors()` and
    `nice_transform_and_log_errors()` write a message to stderr for each bad
    age and leave that user out.
  - `less_verbose_transform_and_ignore_errors()` leaves out users with a bad
    age and writes no message.
  - `transform_and_filter()` also keeps only users older than 60.
  - `transform_and_filter_and_format()` does the same and upper-cases the
    names.
- `chaining.aggregates`: computes figures over the users.
  - `task_01` sums all ages.
  - `task_02` sums the ages of users whose name ends in `a`.
  - `task_03` counts the letter `a` in all names.

  The `*_for_loop` variants of `task_01` and `task_02` raise `ValueError` on
  an invalid age. The chained versions skip invalid ages.
- `chaining.flatten`: sums the known ages in a list of optional `User`s whose
  `age` may be `None`. It provides `classic_sum_user_ages`, `sum_user_ages`
  and `verbose_sum_user_ages`.
- `chaining.parallel`: reads mock `File`s in worker threads. `File.read()`
  raises `CorruptFileError` for a corrupt file. `CorruptFileError` and
  `JoinFailedError` both subclass `ChainingError`.
  - `classic_read_files()` and `read_files()` return the contents joined
    after a `"File contents: "` prefix, and raise the first read error.
  - `ignore_errors_read_files()` joins only the files that could be read. If
    none could be read, it returns a fixed message.
- `chaining.zipping`: pairs a list of names with a list of ages into `User`s,
  stopping at the shorter list. It provides `classical_build_users` and
  `zip_up_users`.
- `chaining.tips`:
  - `name_starts_with_c()` and `name_starts_with_pattern()` take and return
    lazy iterators.
  - `contrived_example()` returns at most the first two users whose name ends
    in `a`.
  - `filter_contrived()` returns at most two users whose following user's
    first name is at least six bytes long.
- `chaining.downloads`: simulates downloads with `download_file()`, which
  waits half a second per URI. The URIs can be downloaded one after another
  (`classical_sequential_download`), as separate tasks
  (`classical_parallel_download`) or with `asyncio.gather`
  (`download_parallel_within_a_chain`).

## Example

```python
from chaining.full_names import receive_users, transform_users_neater

for user in transform_users_neater(receive_users()):
    print(user.full_name)
```

```python
from chaining.ages import receive_users, transform_and_filter_and_format

print(transform_and_filter_and_format(receive_users()))
```

```python
import asyncio
from chaining.downloads import download_parallel_within_a_chain, mock_uris

print(asyncio.run(download_parallel_within_a_chain(mock_uris())))
```

## What it does not do

This is a library of examples only. It has no command-line program. The
"network", "database", "files" and "downloads" are all in-memory mocks:
nothing is received, stored, read from disk or fetched over a network.

## Running the tests

```
pip install -e ".[test]"
pytest
```