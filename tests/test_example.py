"""Smoke test for the example script shipped in src/."""

from argparse import Namespace

from example import run_option


def test_example_option_one_consolidates_all_solution_types(capfd):
    args = Namespace(
        option=1, icp=None, quiet=True, save=None, round=None, incl_cut=None
    )

    result = run_option(args)

    assert result["Solution"].tolist() == (
        ["Conservative"] * 4 + ["Parsimonious"] + ["Intermediate"] * 2
    )
    assert result["Model"].tolist() == [1, 1, 2, 2, "-", "-", "-"]
    assert result["Intermediate_CnPn"].tolist()[-2:] == ["C1P1", "C2P2"]
    assert result.loc[5, "Cases"] == "AT, DK"
    assert "Running example code with option 1" in capfd.readouterr().out
