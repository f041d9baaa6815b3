"""Gates of an and-inverter graph and their fanin/fanout reports."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import NamedTuple, TextIO


class GateType(IntEnum):
    UNDEF = 0
    PI = 1
    PO = 2
    AIG = 3
    CONST = 4


class Pin(NamedTuple):
    """One end of a connection: the gate on the other side and its inversion."""

    gate: "CirGate"
    inverted: bool


class CirGate:
    """A gate with its fanins and fanouts."""

    def __init__(self, gate_type: GateType, gate_id: int, line_no: int = 0) -> None:
        self.gate_type = GateType(gate_type)
        self.id = gate_id
        self.line_no = line_no
        self.name = ""
        self.fanin: list[Pin] = []
        self.fanout: list[Pin] = []

    def __repr__(self) -> str:
        return f"CirGate({self.gate_type.name}, {self.id})"

    def type_str(self) -> str:
        return self.gate_type.name

    def connect_fanin(self, source: "CirGate", inverted: bool = False) -> None:
        """Make ``source`` drive this gate, recording the edge on both ends."""
        self.fanin.append(Pin(source, inverted))
        source.fanout.append(Pin(self, inverted))

    def describe(self) -> str:
        """Short netlist form of the gate."""
        kind = self.gate_type
        if kind is GateType.CONST:
            return "CONST0"
        if kind is GateType.PI:
            text = f"PI  {self.id}"
            return f"{text} ({self.name})" if self.name else text
        if kind is GateType.PO:
            return f"PO  {self.id} "
        if kind is GateType.AIG:
            return f"AIG {self.id} "
        return f"UNDEF {self.id}"

    def report_gate(self, out: TextIO | None = None) -> None:
        out = sys.stdout if out is None else out
        border = "=" * 50
        body = f"= {self.type_str()}({self.id})"
        if self.name:
            body += f'"{self.name}"'
        body += f", line {self.line_no}"
        out.write(f"{border}\n{body.ljust(49)}=\n{border}\n")

    def report_fanin(self, level: int, out: TextIO | None = None) -> None:
        """Print the fanin cone down to ``level``."""
        self._report(level, out, "fanin")

    def report_fanout(self, level: int, out: TextIO | None = None) -> None:
        """Print the fanout cone up to ``level``."""
        self._report(level, out, "fanout")

    def _report(self, level: int, out: TextIO | None, attr: str) -> None:
        if level < 0:
            raise ValueError("level must not be negative")
        out = sys.stdout if out is None else out
        self._walk(level, 0, set(), attr, out)

    def _walk(self, level: int, cur: int, seen: set, attr: str, out: TextIO) -> None:
        if level != -1 and cur > level:
            return
        pins: list[Pin] = getattr(self, attr)
        if pins:
            seen.add(self)
        if cur == 0:
            out.write(f"{self.type_str()} {self.id}\n")
            seen.add(self)
            cur = 1
        for gate, inverted in pins:
            line = "  " * cur + ("!" if inverted else "") + f"{gate.type_str()} {gate.id}"
            if gate in seen:
                out.write(line + " (*)\n")
            else:
                out.write(line + "\n")
                gate._walk(level, cur + 1, seen, attr, out)