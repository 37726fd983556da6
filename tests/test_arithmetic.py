import pytest

from adtkit.arithmetic import arithmetic_report, main


def _blocks(report):
    assert report.endswith("\n\n")
    return report[:-2].split("\n\n")


@pytest.mark.parametrize(
    "a,b",
    [
        ("-330293847502398475", "9876545439000000000000000100000000000006543654365346534"),
        ("7", "-3"),
        ("0", "0"),
        ("123456789123456789", "123456789123456789"),
    ],
)
def test_report_values(a, b):
    x, y = int(a), int(b)
    expected = [x, y, x + y, x - y, 0, 3 * x - 2 * y, x * y, x * x, y * y, 9 * x**4 + 16 * y**5]
    assert _blocks(arithmetic_report(a, b)) == [str(v) for v in expected]


def test_report_has_ten_entries():
    assert len(_blocks(arithmetic_report("+5", "6"))) == 10


def test_report_normalises_input():
    assert _blocks(arithmetic_report("+005", "6"))[0] == "5"


def test_report_rejects_bad_input():
    with pytest.raises(ValueError):
        arithmetic_report("12x", "1")


def test_main_writes_output(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("12\n-34\n")
    assert main([str(source), str(target)]) == 0
    assert target.read_text() == arithmetic_report("12", "-34")


def test_main_wrong_argument_count_does_nothing(tmp_path):
    assert main([str(tmp_path / "only.txt")]) == 0
    assert list(tmp_path.iterdir()) == []


def test_main_bad_number_fails(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("12\n")
    assert main([str(source), str(target)]) == 1
    assert not target.exists()