import re

from miniprintf.demo import main


def _run(capsys):
    status = main()
    return status, capsys.readouterr().out


def test_main_exit_status(capsys):
    status, out = _run(capsys)
    assert status == 0
    assert out.startswith("*********TEST RESULT*********\n")


def test_basic_lines(capsys):
    _, out = _run(capsys)
    lines = out.splitlines()
    assert "c = a" in lines
    assert "s = (null)" in lines
    assert "i = 2147483647" in lines
    assert "d = -2147483648" in lines
    assert "u = 4294967295" in lines
    assert "% = %" in lines


def test_own_output_matches_reference(capsys):
    _, out = _run(capsys)
    lines = out.splitlines()
    for label in ["c", "i", "d", "s", "x", "X", "p", "u", "%"]:
        mine = [line for line in lines if line.startswith(f"{label} = ")]
        real = [line for line in lines if line.startswith(f"real {label} = ")]
        assert len(mine) == 1 and len(real) == 1
        assert real[0] == "real " + mine[0]


def test_returned_lengths_agree(capsys):
    _, out = _run(capsys)
    real = re.findall(r"^real return = (\d+)$", out, re.MULTILINE)
    mine = re.findall(r"^my return = (\d+)$", out, re.MULTILINE)
    assert len(real) == 9
    assert real == mine


def test_each_case_printed_twice(capsys):
    _, out = _run(capsys)
    lines = out.splitlines()
    for title in ["char", "hexa", "HEXA", "pointer", "string", "int", "d", "percent", "u"]:
        matching = [line for line in lines if line.startswith(f"({title}) ")]
        assert len(matching) == 2
        assert matching[0] == matching[1]