from simulator.parser import parse_program
from tools.rule_inspect import find_shadowed, main


def test_find_shadowed_points_at_winning_rule():
    cases = parse_program("A 0 1 -> B\nA 1 1 -> B\nA 0 0 <- C\nA 0 x -> D")
    assert find_shadowed(cases) == {2: 0, 3: 0}


def test_no_shadowing_for_distinct_pairs():
    cases = parse_program("A 0 1 -> B\nB 0 1 -> A")
    assert find_shadowed(cases) == {}


def test_main_prints_table(capsys, tmp_path):
    program = tmp_path / "p.alan"
    program.write_text("Inc 0 1 -> Halt\nInc 0 0 -> Inc\n", encoding="utf-8")
    assert main([str(program)]) == 0
    out = capsys.readouterr().out
    assert "Halt" in out
    assert "shadowed by #0" in out
    assert "[INFO] 2 rules, 1 shadowed." in out


def test_main_reports_parse_errors(capsys, tmp_path):
    program = tmp_path / "p.alan"
    program.write_text("Inc 0 1 =>", encoding="utf-8")
    assert main([str(program)]) == 1
    assert "ERROR: expected '->' or '<-' but got =>" in capsys.readouterr().err
