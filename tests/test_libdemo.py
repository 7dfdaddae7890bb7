import math

import pytest

from oslab.libdemo import main
from oslab.number import Number


@pytest.fixture
def output(capsys):
    code = main([])
    captured = capsys.readouterr()
    return code, captured.out.splitlines()


def _values(lines):
    result = {}
    for line in lines:
        if " = " in line:
            key, value = line.split(" = ", 1)
            result[key] = value
    return result


def test_exit_code_is_zero(output):
    code, _ = output
    assert code == 0


def test_headers_and_layout(output):
    _, lines = output
    assert lines[0] == "Number Library Test"
    blank = lines.index("")
    assert lines[blank + 1] == "Vector Library Test==="


def test_operands_printed(output):
    _, lines = output
    values = _values(lines)
    assert values["a"] == "5"
    assert values["b"] == "3"


def test_arithmetic_lines_agree_with_number(output):
    _, lines = output
    values = _values(lines)
    a, b = Number(5.0), Number(3.0)
    assert float(values["a + b"]) == float(a + b)
    assert float(values["a - b"]) == float(a - b)
    assert float(values["a * b"]) == float(a * b)
    assert math.isclose(float(values["a / b"]), float(a / b), rel_tol=1e-5)


def test_constants_printed(output):
    _, lines = output
    values = _values(lines)
    assert values["NUMBER_ZERO"] == "0"
    assert values["NUMBER_ONE"] == "1"
    assert "VECTOR_ZERO: (0, 0)" in lines
    assert "VECTOR_ONE_ONE: (1, 1)" in lines


def test_vector_lines(output):
    _, lines = output
    assert "Vector v1: (3, 4)" in lines
    assert "Vector v2: (1, 2)" in lines
    assert "Vector v1 + v2: (4, 6)" in lines


def test_polar_lines(output):
    _, lines = output
    v1_line = next(line for line in lines if line.startswith("v1 polar:"))
    assert v1_line.startswith("v1 polar: r=5, phi=")
    phi = float(v1_line.split("phi=")[1])
    assert math.isclose(phi, math.atan2(4.0, 3.0), rel_tol=1e-5)

    v2_line = next(line for line in lines if line.startswith("v2 polar:"))
    r_text, phi_text = v2_line[len("v2 polar: r="):].split(", phi=")
    assert math.isclose(float(r_text) ** 2, 5.0, rel_tol=1e-4)
    assert math.isclose(float(phi_text), math.atan2(2.0, 1.0), rel_tol=1e-5)


def test_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])