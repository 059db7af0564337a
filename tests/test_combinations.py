import io

import pytest

from pocketalgo.combinations import combinations, main


@pytest.mark.parametrize("n", range(0, 12))
def test_edges_of_each_row_are_one(n):
    assert combinations(n, 0) == 1
    assert combinations(n, n) == 1


@pytest.mark.parametrize("n", range(1, 15))
def test_pascal_identity(n):
    for m in range(1, n):
        assert combinations(n, m) == combinations(n - 1, m) + combinations(n - 1, m - 1)


@pytest.mark.parametrize("n", range(0, 15))
def test_row_sums_to_power_of_two(n):
    assert sum(combinations(n, m) for m in range(n + 1)) == 2 ** n


@pytest.mark.parametrize("n", range(0, 15))
def test_symmetry(n):
    for m in range(n + 1):
        assert combinations(n, m) == combinations(n, n - m)


def test_known_value():
    assert combinations(5, 2) == 10


@pytest.mark.parametrize("n, m", [(3, 4), (3, -1), (-1, 0)])
def test_out_of_range_raises(n, m):
    with pytest.raises(ValueError):
        combinations(n, m)


def test_main_with_arguments(capsys):
    assert main(["6", "3"]) == 0
    assert capsys.readouterr().out == f"{combinations(6, 3)}\n"


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("7 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == f"{combinations(7, 2)}\n"


def test_main_rejects_bad_input(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main([]) == 1
    assert capsys.readouterr().out == ""