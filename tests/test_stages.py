import io

import pytest

from oslab.stages import (
    ADD_OFFSET,
    add,
    cube,
    main,
    multiply,
    parse_numbers,
    run_stage,
    total,
)


def _run(name, text):
    out = io.StringIO()
    run_stage(name, io.StringIO(text), out)
    return out.getvalue()


def test_parse_plain_line():
    assert parse_numbers("1 2 3 4 5") == [1, 2, 3, 4, 5]


def test_parse_signs_and_whitespace():
    assert parse_numbers("  -5\t+3 \r\n") == [-5, 3]


def test_parse_stops_at_bad_token():
    assert parse_numbers("1 2 x 3") == [1, 2]
    assert parse_numbers("12abc 4") == [12]
    assert parse_numbers("1.5 2") == [1]


def test_parse_stops_on_out_of_range():
    assert parse_numbers("3000000000 1") == []
    assert parse_numbers("1 -3000000000 2") == [1]


def test_parse_empty():
    assert parse_numbers("") == []


def test_multiply_by_seven():
    assert multiply([1]) == [7]
    assert multiply([]) == []


def test_add_round_trip():
    numbers = [-10, 0, 5, 100]
    shifted = add(numbers, 22)
    assert add(shifted, -22) == numbers


def test_add_default_offset():
    assert add([0]) == [ADD_OFFSET]


def test_cube_sign_and_identity():
    assert cube([0, 1, -1]) == [0, 1, -1]
    assert cube([-3]) == [-x for x in cube([3])]


def test_results_stay_in_int32():
    big = [2**31 - 1, -(2**31)]
    for result in (multiply(big), add(big, 24), cube(big)):
        assert all(-(2**31) <= v <= 2**31 - 1 for v in result)


def test_total_of_empty_is_zero():
    assert total([]) == 0
    assert total(iter([4, -4])) == 0


def test_stage_m_keeps_lines():
    assert _run("m", "1\n") == "7\n"
    assert _run("m", "\n") == "\n"


def test_stage_accepts_uppercase_name():
    assert _run("M", "1\n") == _run("m", "1\n")


def test_stage_last_line_without_newline():
    assert _run("a", "0") == f"{ADD_OFFSET}\n"


def test_stage_s_sums_all_lines():
    assert _run("s", "1 2\n3\n") == "6\n"
    assert _run("s", "") == "0\n"


def test_full_chain_matches_functions():
    text = "1 2 3 4 5\n"
    after_m = _run("m", text)
    after_a = _run("a", after_m)
    after_p = _run("p", after_a)
    result = _run("s", after_p)
    expected = total(cube(add(multiply(parse_numbers(text)), ADD_OFFSET)))
    assert result == f"{expected}\n"


def test_unknown_stage():
    with pytest.raises(ValueError):
        _run("x", "1\n")


def test_main_runs_stage(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main(["m"]) == 0
    assert capsys.readouterr().out == "7\n"


def test_main_rejects_unknown_stage():
    with pytest.raises(SystemExit):
        main(["q"])