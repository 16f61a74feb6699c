import pytest

from boxgame import Box, cantor_pairing, green_score, blue_score, score_for, SCORERS


def test_cantor_pairing_reference_point():
    assert cantor_pairing(0, 1) == 2
    assert cantor_pairing(1, 0) == 1
    assert cantor_pairing(2, 2) == 12
    assert cantor_pairing(3, 21) == 321


def test_green_uses_mean_of_all_when_fewer_than_three():
    assert green_score([3]) == 9.0
    assert green_score([1, 8]) == 20.25


def test_green_uses_only_three_most_recent():
    assert green_score([0, 0, 3]) == 1.0
    assert green_score([100, 1, 2, 3]) == 4.0
    assert green_score([100, 50, 1, 2, 3]) == green_score([1, 2, 3])


def test_green_is_pure():
    h = [4, 5, 6, 7]
    assert green_score(h) == green_score(h)
    assert h == [4, 5, 6, 7]


def test_blue_single_absorption_pairs_value_with_itself():
    assert blue_score([3]) == cantor_pairing(3, 3) == 24.0


def test_blue_pairs_smallest_with_largest():
    assert blue_score([2, 13]) == 133.0
    assert blue_score([13, 2]) == 133.0
    assert blue_score([5, 0, 9, 1]) == cantor_pairing(0, 9)


def test_empty_history_is_an_error():
    with pytest.raises(ValueError):
        green_score([])
    with pytest.raises(ValueError):
        blue_score([])
    with pytest.raises(ValueError):
        Box.make_green_box(0.0).score_on_absorb()


def test_dispatch_table_covers_every_color():
    assert set(SCORERS) == {"G", "B"}
    assert score_for("G", [2, 4]) == green_score([2, 4])
    assert score_for("B", [2, 4]) == blue_score([2, 4])


def test_score_on_absorb_follows_box_color():
    g = Box.make_green_box(0.0)
    b = Box.make_blue_box(0.0)
    for w in (1, 3):
        g.absorb(w)
        b.absorb(w)
    assert g.score_on_absorb() == 4.0
    assert b.score_on_absorb() == cantor_pairing(1, 3)
