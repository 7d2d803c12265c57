from pushswap.cli import main
from pushswap.stack import Stacks


def test_two_values(capsys):
    assert main(["2 1"]) == 0
    out = capsys.readouterr()
    assert out.out == "sa\n"


def test_no_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_duplicate(capsys):
    assert main(["1", "1"]) == 1
    out = capsys.readouterr()
    assert out.err == "Error\n"
    assert out.out == ""


def test_blank_argument(capsys):
    assert main(["1", "  "]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_out_of_range(capsys):
    assert main(["2147483648"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_sorted_prints_nothing(capsys):
    assert main(["1 2 3"]) == 0
    assert capsys.readouterr().out == ""


def test_output_sorts_input(capsys):
    args = ["3", "2 1", "5", "4", "0", "9", "-6"]
    assert main(args) == 0
    lines = capsys.readouterr().out.split()
    stacks = Stacks.from_values([3, 2, 1, 5, 4, 0, 9, -6])
    stacks.run(lines)
    assert stacks.is_solved()