"""Reading, reporting and writing and-inverter graphs in ASCII AIGER form."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from .cirgate import CirGate, GateType, Pin
from .strutil import split_tokens

TRAILER = "AAG output by aigtasks"

_NUMBER = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INDEX = re.compile(r"\s*([+-]?\d+)")


class CircuitError(Exception):
    """Raised when a circuit cannot be read."""


def _to_number(text: str) -> int:
    """Read the leading number of ``text`` the lenient way; 0 if there is none."""
    match = _NUMBER.match(text)
    return int(float(match.group(0))) if match else 0


def _literal(text: str) -> tuple[int, bool]:
    """Split an AIGER literal into its variable id and inversion flag."""
    lit = _to_number(text)
    inverted = lit % 2 != 0
    return (lit - 1) // 2 if inverted else lit // 2, inverted


def _pin_text(pin: Pin) -> str:
    mark = "*" if pin.gate.gate_type is GateType.UNDEF else ""
    return f"{mark}{'!' if pin.inverted else ''}{pin.gate.id}"


class CirMgr:
    """A circuit: its gates, its primary inputs and outputs, and a DFS order."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.max_var = 0
        self.n_inputs = 0
        self.n_latches = 0
        self.n_outputs = 0
        self.n_ands = 0
        self.inputs: list[CirGate] = []
        self.outputs: list[CirGate] = []
        self.ands: list[CirGate] = []
        self._lines: list[str] = []
        self._gates: dict[int, CirGate] = {}
        self._dfs: list[CirGate] = []

    # construction ---------------------------------------------------------

    def read_circuit(self, path: str) -> None:
        """Read the circuit stored in the file at ``path``."""
        try:
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise CircuitError(f'Cannot open design "{path}"!!') from exc
        self._parse(text)

    @classmethod
    def from_text(cls, text: str) -> "CirMgr":
        """Build a circuit from the text of an ``.aag`` file."""
        mgr = cls()
        mgr._parse(text)
        return mgr

    def _parse(self, text: str) -> None:
        self._reset()
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        if not lines:
            raise CircuitError("empty circuit description")
        self._lines = lines
        self._read_header()
        self._gates[0] = CirGate(GateType.CONST, 0, 0)
        self._read_inputs()
        self._read_outputs()
        self._read_ands()
        self._read_symbols()
        self._connect()
        self._build_dfs()

    def _read_header(self) -> None:
        fields = self._lines[0].split(" ")
        if len(fields) < 6:
            raise CircuitError(f"invalid header: {self._lines[0]!r}")
        (self.max_var, self.n_inputs, self.n_latches,
         self.n_outputs, self.n_ands) = (_to_number(f) for f in fields[1:6])
        needed = 1 + self.n_inputs + self.n_outputs + self.n_ands
        if len(self._lines) < needed:
            raise CircuitError(
                f"expected at least {needed} lines, found {len(self._lines)}"
            )

    def _read_inputs(self) -> None:
        for i in range(self.n_inputs):
            gate_id = _to_number(self._lines[i + 1]) // 2
            gate = CirGate(GateType.PI, gate_id, i + 2)
            self.inputs.append(gate)
            self._gates[gate_id] = gate

    def _read_outputs(self) -> None:
        for i in range(self.n_outputs):
            gate_id = self.max_var + i + 1
            gate = CirGate(GateType.PO, gate_id, i + 2 + self.n_inputs)
            self.outputs.append(gate)
            self._gates[gate_id] = gate

    def _and_tokens(self, i: int) -> list[str]:
        line = self._lines[i + 1 + self.n_inputs + self.n_outputs]
        tokens = split_tokens(line)
        if len(tokens) < 3:
            raise CircuitError(f"invalid AND gate definition: {line!r}")
        return tokens

    def _read_ands(self) -> None:
        for i in range(self.n_ands):
            gate_id = _to_number(self._and_tokens(i)[0]) // 2
            gate = CirGate(GateType.AIG, gate_id, i + 2 + self.n_inputs + self.n_outputs)
            self.ands.append(gate)
            self._gates[gate_id] = gate

    def _symbol_lines(self):
        for line in self._lines[self.n_inputs + self.n_outputs + self.n_ands + 1:]:
            if line == "c":
                return
            yield line

    def _read_symbols(self) -> None:
        for line in self._symbol_lines():
            if line[:1] not in ("i", "o"):
                continue
            targets = self.inputs if line[0] == "i" else self.outputs
            tokens = split_tokens(line)
            match = _INDEX.match(tokens[0][1:]) if tokens else None
            if match is None or len(tokens) < 2:
                raise CircuitError(f"invalid symbol line: {line!r}")
            index = int(match.group(1))
            if not 0 <= index < len(targets):
                raise CircuitError(f"symbol index out of range: {line!r}")
            targets[index].name = tokens[1]

    def _gate_or_undef(self, gate_id: int) -> CirGate:
        if gate_id not in self._gates:
            self._gates[gate_id] = CirGate(GateType.UNDEF, gate_id)
        return self._gates[gate_id]

    def _connect(self) -> None:
        for i in range(self.n_ands):
            tokens = self._and_tokens(i)
            target = self._gates[_to_number(tokens[0]) // 2]
            for token in tokens[1:3]:
                gate_id, inverted = _literal(token)
                target.connect_fanin(self._gate_or_undef(gate_id), inverted)
        for i in range(self.n_outputs):
            target = self._gates[self.max_var + i + 1]
            gate_id, inverted = _literal(self._lines[i + 1 + self.n_inputs])
            target.connect_fanin(self._gate_or_undef(gate_id), inverted)

    def _build_dfs(self) -> None:
        seen: set[CirGate] = set()
        order: list[CirGate] = []
        for output in self.outputs:
            root = self._gates[output.id]
            stack = [(root, iter(root.fanin))]
            while stack:
                gate, pins = stack[-1]
                for source, _ in pins:
                    if source not in seen:
                        seen.add(source)
                        stack.append((source, iter(source.fanin)))
                        break
                else:
                    stack.pop()
                    order.append(gate)
        self._dfs = order

    # access ---------------------------------------------------------------

    def get_gate(self, gate_id: int) -> CirGate | None:
        """Return the gate with ``gate_id``, or None if there is none."""
        return self._gates.get(gate_id)

    def dfs_list(self) -> list[CirGate]:
        """Gates reachable from the outputs, in depth-first post-order."""
        return list(self._dfs)

    # reporting ------------------------------------------------------------

    @staticmethod
    def _out(out: TextIO | None) -> TextIO:
        return sys.stdout if out is None else out

    def print_summary(self, out: TextIO | None = None) -> None:
        out = self._out(out)
        total = self.n_inputs + self.n_outputs + self.n_ands
        out.write(
            "\nCircuit Statistics\n"
            "==================\n"
            f"  PI    {self.n_inputs:>8}\n"
            f"  PO    {self.n_outputs:>8}\n"
            f"  AIG   {self.n_ands:>8}\n"
            "------------------\n"
            f"  Total {total:>8}\n"
        )

    def print_netlist(self, out: TextIO | None = None) -> None:
        out = self._out(out)
        out.write("\n")
        index = 0
        for gate in self._dfs:
            kind = gate.gate_type
            if kind is GateType.UNDEF:
                continue
            line = f"[{index}] {gate.describe()}"
            if kind is GateType.PO:
                line += _pin_text(gate.fanin[0])
                if gate.name:
                    line += f" ({gate.name})"
            elif kind is GateType.AIG:
                line += f"{_pin_text(gate.fanin[0])} {_pin_text(gate.fanin[1])}"
            out.write(line + "\n")
            index += 1

    def print_pis(self, out: TextIO | None = None) -> None:
        ids = "".join(f" {gate.id}" for gate in self.inputs)
        self._out(out).write(f"PIs of the circuit:{ids}\n")

    def print_pos(self, out: TextIO | None = None) -> None:
        ids = "".join(f" {gate.id}" for gate in self.outputs)
        self._out(out).write(f"POs of the circuit:{ids}\n")

    def print_float_gates(self, out: TextIO | None = None) -> None:
        out = self._out(out)
        undef: list[int] = []
        unused: list[int] = []
        for gate_id, gate in sorted(self._gates.items()):
            if gate.gate_type is GateType.CONST:
                continue
            if gate.gate_type is not GateType.PO and not gate.fanout:
                unused.append(gate_id)
                continue
            if any(pin.gate.gate_type is GateType.UNDEF for pin in gate.fanin):
                undef.append(gate_id)
        if undef:
            out.write("Gates with floating fanin(s):" + "".join(f" {i}" for i in undef) + "\n")
        if unused:
            out.write("Gates defined but not used  :" + "".join(f" {i}" for i in unused) + "\n")

    def write_aag(self, out: TextIO | None = None) -> None:
        """Write the reachable part of the circuit in ``.aag`` form."""
        out = self._out(out)
        dfs_ands = [gate for gate in self._dfs if gate.gate_type is GateType.AIG]
        out.write(
            f"aag {self.max_var} {self.n_inputs} {self.n_latches} "
            f"{self.n_outputs} {len(dfs_ands)}\n"
        )
        for line in self._lines[1:1 + self.n_inputs + self.n_outputs]:
            out.write(line + "\n")
        for gate in dfs_ands:
            out.write(self._lines[gate.line_no - 1] + "\n")
        for line in self._symbol_lines():
            out.write(line + "\n")
        out.write(f"c\n{TRAILER}\n")