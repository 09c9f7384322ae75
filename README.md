# accelutil

Building blocks for command-line tools that configure hardware accelerators
through sysfs. The package uses only the standard library.

## What is inside

| Module | Purpose |
| --- | --- |
| `accelutil.usage` | `die`, `error`, `warning`, `usage` and `report` diagnostics on standard error; `set_die_routine` replaces the fatal-error handler |
| `accelutil.paths` | `prefix_filename`, `fix_filename`, `is_absolute_path`, `skip_prefix`, `prefixcmp`, `round_up`, `round_down`, `read_fd` |
| `accelutil.size` | size strings with `k`/`M`/`G`/`T` suffixes (`parse_size64`, `parse_size64_with_units`) and `align`, `align_down` |
| `accelutil.bitmap` | the `Bitmap` class: set and clear ranges, test bits, find the next set or clear bit, check whether it is full |
| `accelutil.log` | `LogContext` with a priority threshold that an environment variable can override; `Priority`, `parse_log_priority` |
| `accelutil.sysfs` | `read_attr`, `write_attr`, `device_parse` for scanning device directories, `devpath_to_devname` |
| `accelutil.help` | `cmd_to_page`, `system_path`, `build_man_path`, and `show_man_page`, which replaces the process with `man` or another viewer |
| `accelutil.dispatch` | `Command`, `handle_options` for the global options before a subcommand, `handle_internal_command` to run one |
| `accelutil.names` | `scan_device_type_id`, `scan_parent_child_names`, `scan_parent_child_ids` for names such as `dsa0` and `dsa0/wq0.1` |

## Examples

Sizes:

```python
from accelutil.size import parse_size64, parse_size64_with_units

parse_size64("4k")              # 4096
parse_size64("2M")              # 2097152
parse_size64_with_units("3G")   # (3221225472, 1073741824)
parse_size64("12x")             # raises ValueError
```

Bitmaps:

```python
from accelutil.bitmap import Bitmap

bits = Bitmap(128)
bits.set(0, 10)
bits.test(3)                 # True
bits.find_next_zero_bit(0)   # 10
bits.find_next_bit(10)       # 128, nothing set after bit 9
bits.full()                  # False
```

Device names:

```python
from accelutil.names import (
    scan_device_type_id,
    scan_parent_child_ids,
    scan_parent_child_names,
)

scan_device_type_id("dsa0")             # ("dsa", 0)
scan_parent_child_names("dsa0/wq0.1")   # ("dsa0", "wq0.1")
scan_parent_child_ids("wq0.1")          # (0, 1)
```

Paths:

```python
from accelutil.paths import fix_filename, prefix_filename

prefix_filename("/work/", "conf.json")   # "/work/conf.json"
prefix_filename("/work/", "/etc/x")      # "/etc/x"
fix_filename("/work/", "-")              # "-"
```

Sysfs attributes:

```python
from accelutil.sysfs import read_attr, write_attr

state = read_attr("/sys/bus/dsa/devices/dsa0/state")   # trailing newline removed
write_attr("/sys/bus/dsa/devices/dsa0/wq0.0/size", "16")
```

Command dispatch:

```python
from accelutil.dispatch import Command, handle_internal_command

commands = [Command("list", lambda argv, ctx: 0)]
handle_internal_command(["list"], None, commands)    # 0
handle_internal_command(["nope"], None, commands)    # raises ValueError
```

Failures are raised as exceptions (`ValueError`, `OSError`, `RuntimeError`)
rather than returned as status codes. `die` and `usage` end the process with
status 128 and 129 unless a different die routine is installed.

## What the package does not do

- It has no parser for per-command options and prints no per-option help
  text; `dispatch.handle_options` only handles `--version`/`-v`,
  `--help`/`-h`, `--list-cmds` and the choice of subcommand.
- It does not build or print JSON descriptions of devices, work queues or
  engines.
- It installs no command of its own; a tool built on it supplies its
  commands through `Command` and calls `handle_options` itself.
- It does not talk to accelerator hardware beyond reading and writing the
  sysfs files it is given.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.