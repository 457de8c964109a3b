import pytest

from cardguess.deck import DECK_FREQUENCIES, sample_cards
from cardguess.huffman import build_code, build_tree
from cardguess.randomizer import MAX_MASK_BITS
from cardguess.session import GuessParams, GuessSession, parse_answer, parse_flag


def play_card(session, card):
    for b in session.code[card]:
        assert session.current_question() is not None
        session.answer(b)
    return session.guess


@pytest.mark.parametrize("card", ["AS", "KC", "10H", "7D"])
def test_guesses_the_chosen_card(card):
    s = GuessSession(params=GuessParams(seed=3))
    assert play_card(s, card) == card
    assert s.finished
    assert len(s.answers) == len(s.code[card])
    assert s.current_question() is None


def test_every_question_contains_card_iff_answer_is_yes():
    s = GuessSession(params=GuessParams(seed=11))
    card = "QH"
    for b in s.code[card]:
        assert (card in s.current_question()) == (b == "1")
        s.answer(b)
    assert s.guess == card


def test_answer_after_finish_raises():
    s = GuessSession(params=GuessParams(seed=0))
    play_card(s, "AS")
    with pytest.raises(RuntimeError):
        s.answer("s")


def test_invalid_answer_is_not_recorded():
    s = GuessSession(params=GuessParams(seed=0))
    with pytest.raises(ValueError):
        s.answer("maybe")
    assert s.answers == []
    assert s.index == 0


def test_parse_answer():
    assert parse_answer("Sí") == 1
    assert parse_answer("yes") == 1
    assert parse_answer(" n ") == 0
    assert parse_answer(True) == 1
    assert parse_answer(0) == 0
    with pytest.raises(ValueError):
        parse_answer(2)


def test_reset_keeps_base_tree_and_lengths():
    s = GuessSession(params=GuessParams(seed=5))
    base = s.base_tree
    lengths = {c: len(b) for c, b in build_code(base).items()}
    play_card(s, "AS")
    for _ in range(5):
        s.reset()
        assert s.answers == [] and s.guess is None and s.index == 0
        assert s.base_tree is base
        assert {c: len(b) for c, b in s.code.items()} == lengths


def test_without_randomization_uses_plain_huffman_code():
    s = GuessSession(params=GuessParams(randomize=False))
    assert s.code == build_code(build_tree(DECK_FREQUENCIES))


def test_same_seed_same_questions():
    a = GuessSession(params=GuessParams(seed=42))
    b = GuessSession(params=GuessParams(seed=42))
    assert a.questions == b.questions


def test_single_symbol_session_finishes_without_questions():
    s = GuessSession({"X": 5})
    assert s.finished
    assert s.guess == "X"
    assert s.questions == []
    assert s.current_question() is None


def test_custom_frequencies_and_bad_params():
    s = GuessSession({"A": 5, "B": 2, "C": 1, "D": 1}, GuessParams(seed=1))
    assert play_card(s, "C") == "C"
    with pytest.raises(ValueError):
        GuessSession(params=GuessParams(mask_bits=-1))
    with pytest.raises(ValueError):
        GuessSession({})


def test_to_dict():
    s = GuessSession(params=GuessParams(seed=2))
    s.answer(1)
    d = s.to_dict()
    assert d["answers"] == "1"
    assert d["question_index"] == 1
    assert d["total_questions"] == len(s.questions)
    assert d["params"] == {"seed": 2, "mask_bits": 53, "randomize": True}


def test_from_cards_counts_the_multiset():
    s = GuessSession.from_cards(sample_cards(), GuessParams(randomize=False))
    assert s.frequencies == DECK_FREQUENCIES
    assert GuessSession().frequencies == DECK_FREQUENCIES
    t = GuessSession.from_cards(["X", "Y", "X", "X"], GuessParams(seed=0))
    assert t.frequencies == {"X": 3, "Y": 1}
    assert play_card(t, "Y") == "Y"
    with pytest.raises(ValueError):
        GuessSession.from_cards([])


def test_mask_bits_cap():
    assert GuessSession(params=GuessParams(seed=0, mask_bits=MAX_MASK_BITS)).finished is False
    with pytest.raises(ValueError):
        GuessSession(params=GuessParams(mask_bits=MAX_MASK_BITS + 1))


def test_parse_flag():
    assert parse_flag(None, True) is True
    assert parse_flag(False, True) is False
    assert parse_flag("false", True) is False
    assert parse_flag("sí", False) is True
    assert parse_flag(0, True) is False
    with pytest.raises(ValueError):
        parse_flag("quizás", True)
