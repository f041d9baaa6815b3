import io

import pytest

from aigtasks.cirgate import CirGate, GateType


def _chain():
    pi1 = CirGate(GateType.PI, 1, 2)
    pi2 = CirGate(GateType.PI, 2, 3)
    aig = CirGate(GateType.AIG, 3, 5)
    aig.connect_fanin(pi1, True)
    aig.connect_fanin(pi2, False)
    po = CirGate(GateType.PO, 4, 4)
    po.connect_fanin(aig, True)
    return pi1, pi2, aig, po


def _report(gate, method, level):
    out = io.StringIO()
    getattr(gate, method)(level, out)
    return out.getvalue().splitlines()


def test_type_values_and_strings():
    assert GateType.UNDEF == 0 and GateType.CONST == 4
    assert CirGate(GateType.AIG, 3).type_str() == "AIG"
    assert CirGate(GateType.CONST, 0).type_str() == "CONST"


def test_connect_records_both_ends():
    pi1, pi2, aig, po = _chain()
    assert [(p.gate, p.inverted) for p in aig.fanin] == [(pi1, True), (pi2, False)]
    assert [(p.gate, p.inverted) for p in pi1.fanout] == [(aig, True)]
    assert po.fanin[0].gate is aig


def test_describe():
    pi = CirGate(GateType.PI, 1)
    pi.name = "a"
    assert pi.describe() == "PI  1 (a)"
    assert CirGate(GateType.CONST, 0).describe() == "CONST0"
    assert CirGate(GateType.AIG, 3).describe() == "AIG 3 "
    assert CirGate(GateType.UNDEF, 7).describe() == "UNDEF 7"


def test_report_gate_layout():
    gate = CirGate(GateType.AIG, 3, 5)
    out = io.StringIO()
    gate.report_gate(out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "=" * 50 == lines[2]
    assert lines[1].startswith("= AIG(3), line 5")
    assert lines[1].endswith("=") and len(lines[1]) == 50


def test_report_gate_with_name():
    gate = CirGate(GateType.PI, 1, 2)
    gate.name = "a"
    out = io.StringIO()
    gate.report_gate(out)
    assert out.getvalue().splitlines()[1].startswith('= PI(1)"a", line 2')


def test_fanin_level_one():
    *_, po = _chain()
    assert _report(po, "report_fanin", 1) == ["PO 4", "  !AIG 3"]


def test_fanin_level_two():
    *_, po = _chain()
    assert _report(po, "report_fanin", 2) == ["PO 4", "  !AIG 3", "    !PI 1", "    PI 2"]


def test_fanout_levels():
    pi1, *_ = _chain()
    assert _report(pi1, "report_fanout", 1) == ["PI 1", "  !AIG 3"]
    assert _report(pi1, "report_fanout", 2) == ["PI 1", "  !AIG 3", "    !PO 4"]


def test_repeated_gate_is_marked():
    pi1, pi2, aig, _ = _chain()
    top = CirGate(GateType.AIG, 5)
    top.connect_fanin(aig)
    top.connect_fanin(aig)
    po = CirGate(GateType.PO, 6)
    po.connect_fanin(top)
    lines = _report(po, "report_fanin", 3)
    assert lines[-1] == "    AIG 3 (*)"
    assert lines.count("    AIG 3") == 1


def test_negative_level_rejected():
    *_, po = _chain()
    with pytest.raises(ValueError):
        po.report_fanin(-1, io.StringIO())