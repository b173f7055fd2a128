"""Tests for the method comparison table."""

import pandas as pd

import compare
from util import GridReader


def test_forward_grid_runs_every_method(test_cases):
    grid = GridReader(str(test_cases / "forward.txt")).read_problem()
    df = compare.compare_methods(grid)
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == compare.COLUMNS
    assert list(df['method']) == ["BFS", "AS", "COUNT"]
    rows = df.set_index('method')
    assert rows.loc["BFS", 'outcome'] == "2 paths"
    assert rows.loc["AS", 'path_length'] == 4
    assert rows.loc["COUNT", 'outcome'] == "2 paths"
    assert pd.isna(rows.loc["COUNT", 'path_length'])


def test_cyclic_grid_only_runs_astar(test_cases):
    grid = GridReader(str(test_cases / "maze.txt")).read_problem()
    df = compare.compare_methods(grid)
    assert list(df['method']) == ["AS"]
    assert df.iloc[0]['path_length'] == 7


def test_unreachable_row(test_cases):
    grid = GridReader(str(test_cases / "walled_off.txt")).read_problem()
    df = compare.compare_methods(grid)
    assert df.iloc[0]['outcome'] == "no path"


def test_main_prints_table(test_cases, capsys):
    assert compare.main(str(test_cases / "forward.txt")) == 0
    out = capsys.readouterr().out
    assert "Moves: forward" in out
    assert "runtime_ms" in out


def test_main_nothing_to_run(write_problem, capsys):
    path = write_problem("Grid:\n..\n")
    assert compare.main(path) == 1
    assert "No method could run" in capsys.readouterr().out
