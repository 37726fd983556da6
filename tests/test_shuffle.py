import pytest

from adtkit.shuffle import main, perfect_shuffle, shuffle_count, shuffle_table


def test_shuffle_even_deck():
    assert perfect_shuffle([0, 1, 2, 3]) == [2, 0, 3, 1]


def test_shuffle_odd_deck_puts_extra_in_back_half():
    assert perfect_shuffle([0, 1, 2]) == [1, 0, 2]


@pytest.mark.parametrize("size", range(0, 30))
def test_shuffle_is_permutation(size):
    deck = list(range(size))
    assert sorted(perfect_shuffle(deck)) == deck


def test_small_counts():
    assert shuffle_count(1) == 1
    assert shuffle_count(2) == 2


@pytest.mark.parametrize("size", range(1, 40))
def test_count_is_minimal_period(size):
    count = shuffle_count(size)
    original = list(range(size))
    deck = original
    for step in range(1, count + 1):
        deck = perfect_shuffle(deck)
        if step < count:
            assert deck != original
    assert deck == original


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        shuffle_count(-1)


def test_table_rows():
    rows = list(shuffle_table(10))
    assert [size for size, _ in rows] == list(range(1, 11))
    assert all(count == shuffle_count(size) for size, count in rows)


def test_main_output(capsys):
    assert main(["3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "deck size       shuffle count"
    assert lines[1] == "-" * 30
    assert len(lines) == 5
    assert lines[2] == " 1               1"
    assert lines[3].split() == ["2", str(shuffle_count(2))]


def test_main_requires_argument(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_rejects_non_number():
    assert main(["ten"]) == 1