import pytest

from cardguess.deck import DECK_FREQUENCIES
from cardguess.huffman import Leaf, build_code, build_tree
from cardguess.questions import collect_by_bit
from cardguess.randomizer import MASK_BITS, MAX_MASK_BITS, random_mask, randomize, swap_children


@pytest.fixture
def tree():
    return build_tree(DECK_FREQUENCIES)


def flip(bits):
    return "".join("1" if b == "0" else "0" for b in bits)


@pytest.mark.parametrize("seed", range(10))
def test_randomize_preserves_code_lengths(tree, seed):
    before = build_code(tree)
    after = build_code(randomize(tree, rng=seed))
    assert {s: len(c) for s, c in after.items()} == {s: len(c) for s, c in before.items()}


def test_randomize_does_not_touch_original(tree):
    before = build_code(tree)
    new = randomize(tree, rng=1)
    assert new is not tree
    assert build_code(tree) == before


def test_all_ones_mask_flips_every_bit(tree):
    before = build_code(tree)
    after = build_code(swap_children(tree, [1] * MASK_BITS))
    assert after == {s: flip(c) for s, c in before.items()}


def test_zero_or_empty_mask_keeps_orientation(tree):
    assert swap_children(tree, [0] * MASK_BITS) == tree
    assert swap_children(tree, []) == tree


def test_swap_at_one_depth_complements_that_question(tree):
    before = build_code(tree)
    after = build_code(swap_children(tree, [0, 1]))
    for s, c in before.items():
        expected = c if len(c) < 2 else c[0] + flip(c[1]) + c[2:]
        assert after[s] == expected

    old_q = collect_by_bit(before)[1]
    new_q = collect_by_bit(after)[1]
    reaching = {s for s, c in before.items() if len(c) > 1}
    assert set(new_q) == reaching - set(old_q)


def test_seeded_randomization_is_reproducible(tree):
    assert build_code(randomize(tree, rng=7)) == build_code(randomize(tree, rng=7))


def test_random_mask():
    mask = random_mask(rng=0)
    assert len(mask) == MASK_BITS
    assert set(mask) <= {0, 1}
    assert len(random_mask(4, rng=0)) == 4
    with pytest.raises(ValueError):
        random_mask(-1)
    with pytest.raises(ValueError):
        random_mask(MAX_MASK_BITS + 1)
    assert len(random_mask(MAX_MASK_BITS, rng=0)) == MAX_MASK_BITS


def test_mask_is_longer_than_deck_tree(tree):
    assert max(len(c) for c in build_code(tree).values()) < MASK_BITS


def test_single_leaf_is_copied():
    leaf = Leaf("X", 5)
    new = randomize(leaf, rng=0)
    assert new == leaf
    assert new is not leaf
