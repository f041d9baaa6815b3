# aigtasks

Two small toolkits in one package:

* **Circuits** (`aigtasks.cirmgr`, `aigtasks.cirgate`): read an ASCII AIG
  file (`.aag`), build its gate netlist, and report on it: summary
  statistics, a depth-first netlist, primary inputs and outputs, floating and
  unused gates, fan-in and fan-out cones. The reachable part of the circuit
  can be written back out as `.aag`.
* **Tasks** (`aigtasks.task`): a task manager that keeps named task nodes
  with loads in a hash set and a min-heap, and hands new load to the least
  loaded node.

It needs nothing outside the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Reading a circuit

```python
import sys
from aigtasks.cirmgr import CirMgr, CircuitError

mgr = CirMgr()
try:
    mgr.read_circuit("design.aag")
except CircuitError as exc:
    print(exc)

mgr.print_summary(sys.stdout)      # counts of PIs, POs and AND gates
mgr.print_netlist(sys.stdout)      # gates in depth-first order from the POs
mgr.print_pis(sys.stdout)
mgr.print_pos(sys.stdout)
mgr.print_float_gates(sys.stdout)  # floating fanins, defined-but-unused gates

with open("copy.aag", "w") as out:
    mgr.write_aag(out)
```

Every printing method writes to standard output when no stream is given.
A circuit can also be built straight from text with `CirMgr.from_text(text)`.
`read_circuit` raises `CircuitError` when the file cannot be opened or its
header, AND lines or symbol lines are malformed. `dfs_list()` returns the
gates reachable from the outputs in depth-first post-order.

`write_aag` writes the header (with the AND count of the reachable gates
only), the input and output lines, the reachable AND lines, the symbol lines,
and a closing comment section ending in `AAG output by aigtasks`.

Single gates are looked up by id with `get_gate`, which gives `None` for an
id that is not in the circuit:

```python
gate = mgr.get_gate(3)
gate.report_gate(sys.stdout)
gate.report_fanin(2, sys.stdout)   # fan-in cone, two levels deep
gate.report_fanout(2, sys.stdout)  # fan-out cone, two levels deep
```

In cone reports an inverted edge is prefixed with `!`, and a gate already
shown earlier in the same report is followed by `(*)`. A negative level
raises `ValueError`. Gate kinds are given by `aigtasks.cirgate.GateType`
(`UNDEF`, `PI`, `PO`, `AIG`, `CONST`).

## Generating a command script for a circuit

`aigtasks.dofile` produces a command script that reads a circuit, asks for
every report and queries every gate id, each with a fan-in report:

```python
from aigtasks.dofile import dofile_lines, write_dofile

for line in dofile_lines("design.aag", 100):
    print(line)

write_dofile("design.aag", "do_design", 100)
```

The same is available from the command line:

```
aigtasks-dofile design.aag -o do_design -l 100
```

Without `-o` the script is written to `do<name>` in the current directory,
`<name>` being the circuit file's name without its extension.

## Managing tasks

```python
import sys
from aigtasks.task import TaskMgr
from aigtasks.util import RandomNumGen

mgr = TaskMgr(5, RandomNumGen(0), sys.stdout)
mgr.add("alpha", 10)       # False if a node of that name exists
mgr.add("beta", 3)
mgr.add_random(3)          # three nodes with random names and loads

print(mgr.min())           # least loaded node: (beta, 3)
mgr.assign(50)             # add load to the least loaded node
print(mgr.query("beta"))   # the stored node, or None
mgr.remove("alpha")        # False if there is no such node
mgr.remove_random(1)
mgr.print_all_heap()
mgr.print_all_hash()
mgr.clear()
```

Insertions and removals are reported on the manager's output stream as
`Task node inserted: (name, load)` and `Task node removed: (name, load)`.
Task nodes are equal when their names are equal and are ordered by load;
`TaskNode.random(rng)` makes a node with a six-letter name and a load below
20000.

## Building blocks

* `aigtasks.hashset.HashSet`: a bucketed hash set with `insert`, `remove`,
  `check`, `query` and `update`, iterable in bucket order; the bucket count
  is fixed by `init`.
* `aigtasks.minheap.MinHeap`: a binary min-heap with `insert`, `min`,
  `del_min` and deletion at any index with `del_data`.
* `aigtasks.util`: `get_hash_size` picks a bucket count for an expected
  number of entries, `list_dir` lists a directory's names by prefix,
  `RandomNumGen` is a seeded pseudo-random source, and `Usage` reports CPU
  time and memory used since `reset`.
* `aigtasks.strutil`: command-style string helpers: case-insensitive
  abbreviation matching (`str_ncmp`), tokenising (`str_get_tok`,
  `split_tokens`), strict integer parsing (`str_to_int`) and identifier
  checking (`is_valid_var_name`).

## What is not included

There is no interactive command shell. The scripts written by
`aigtasks-dofile` use short command names such as `cirr`, `cirp` and
`cirg`, but this package has nothing that reads and runs them; the circuit
and task features are used through the Python classes above. Circuit
reading checks only the structure it needs and does not give detailed,
line-and-column error diagnostics for malformed `.aag` files.