# zerg

A collection of small utilities:

- `zerg.text` – splitting, trimming, ASCII case conversion, word wrapping
  (`word_wrap`), `${name}` placeholder substitution (`replace_placeholders`),
  GBK decoding, random alphanumeric strings and name-range expansion
  (`expand_names("f[1-3],g")` gives `["f1", "f2", "f3", "g"]`).
- `zerg.numeric` – `float_equal` with a tolerance, `round_up`, `is_zero`,
  `sign` and `is_valid`.
- `zerg.seqtools` – `parse_int`, `parse_float` and `parse_bool` for
  parameter strings, plus `head`, `is_subset`, `has_common_element`,
  `dedupe_keep_order` and `format_items`.
- `zerg.timeutil` – epoch clocks, `YYYYMMDD` dates, intraday `HHMMSS`
  values, weekday lists (`weekdays_in_year`), `next_date`, human-readable
  intervals (`human_readable_millisecond("10 min")` gives `600000`) and
  date/time placeholder substitution (`replace_time_placeholder`).
- `zerg.zlog` – `log` prints a message prefixed with the local time;
  `fail` logs and then raises `RuntimeError`.
- `zerg.bitmap.Bitmap` – a bit matrix with row and column counts.
- `zerg.dag.DAG` – a dependency graph with a depth-first topological sort.
- `zerg.intlist.IntList` – a growable list of unsigned 32-bit integers.
- `zerg.sortedset.SortedVectorSet` – a set kept as a sorted list, with
  `lower_bound`, `upper_bound` and `equal_range`.
- `zerg.taplist.TapList` – a double-ended list growing in blocks, with
  `TapCursor` positions and erasure of runs from either end.
- `zerg.bash_cmd.BashCommand` – run a `/bin/sh -c` command with a pipe to
  its standard output (mode `"r"`) or standard input; usable as a context
  manager.

## Installation

```
pip install .
```

## Example

```python
from zerg.dag import DAG
from zerg.text import replace_placeholders

graph = DAG()
a = graph.add_node("a")
b = graph.add_node("b")
graph.add_dependency(b, a)
graph.sort()
print(graph.sorted_list())  # [0, 1]

print(replace_placeholders("${root}/lib", {"root": "/srv"}))  # /srv/lib
```

## What it does not do

The package has no file or directory helpers, no process, host or CPU
affinity queries, no PID files or single-instance checks, and no
shared-memory command channel between processes. It provides no
command-line program.

## Running the tests

```
pip install .[test]
pytest
```