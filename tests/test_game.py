import io

import pytest

from gallows.game import HangmanGame


class _Words:
    def __init__(self, *words):
        self._words = list(words)
        self._index = 0

    def random_word(self, rng=None):
        word = self._words[self._index % len(self._words)]
        self._index += 1
        return word


class _Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _game(*words):
    out = io.StringIO()
    clock = _Clock()
    return HangmanGame(_Words(*words), out, clock), out, clock


def test_initial_state():
    game, _, _ = _game("cat")
    assert game.current_word == "cat"
    assert game.attempts_left == 6
    assert game.guessed_letters == ""
    assert not game.is_game_over()
    assert not game.is_word_guessed()


def test_good_guess():
    game, out, _ = _game("cat")
    game.guess_letter("a")
    assert game.attempts_left == 6
    assert game.guessed_letters == "a"
    assert "Good guess!" in out.getvalue()


def test_wrong_guess_draws_head():
    game, out, _ = _game("cat")
    before = game.figure()
    game.guess_letter("z")
    assert game.attempts_left == 5
    assert game.figure()[2][2] == "O"
    assert before[2][2] == " "
    assert "Attempts left: 5" in out.getvalue()


def test_uppercase_is_lowered():
    game, _, _ = _game("cat")
    game.guess_letter("C")
    assert game.guessed_letters == "c"


@pytest.mark.parametrize("bad", ["1", "", "ab", "é", " "])
def test_invalid_letters_rejected(bad):
    game, out, _ = _game("cat")
    game.guess_letter(bad)
    assert game.guessed_letters == ""
    assert game.attempts_left == 6
    assert "Please enter a valid English letter." in out.getvalue()


def test_repeated_guess_costs_nothing():
    game, out, _ = _game("cat")
    game.guess_letter("z")
    game.guess_letter("z")
    assert game.attempts_left == 5
    assert game.guessed_letters == "z"
    assert "You already guessed the letter: z" in out.getvalue()


def test_six_wrong_guesses_end_game():
    game, _, _ = _game("cat")
    for letter in "bdefgh":
        game.guess_letter(letter)
    assert game.is_game_over()
    assert not game.is_word_guessed()
    figure = game.figure()
    assert figure[4][3] == "\\"
    assert figure[3][1:4] == "/|\\"


def test_word_guessed():
    game, _, _ = _game("cat")
    for letter in "tac":
        game.guess_letter(letter)
    assert game.is_word_guessed()
    assert game.masked_word().replace(" ", "") == "cat"


def test_masked_word():
    game, _, _ = _game("cat")
    game.guess_letter("a")
    assert game.masked_word() == "_ a _"


def test_open_two_letters_repeated_vowel():
    game, out, _ = _game("banana")
    game.open_two_letters()
    assert game.guessed_letters == "aa"
    assert "Two letters opened: a and a" in out.getvalue()


def test_open_two_letters_single_vowel():
    game, _, _ = _game("cat")
    game.open_two_letters()
    assert game.guessed_letters == "a"


def test_open_two_letters_too_short():
    game, out, _ = _game("a")
    game.open_two_letters()
    assert game.guessed_letters == ""
    assert "The word is too short to open two letters." in out.getvalue()


def test_open_two_letters_without_vowels():
    game, _, _ = _game("rhythm")
    game.open_two_letters()
    assert game.guessed_letters == ""


def test_reset_restores_state():
    game, _, _ = _game("cat", "dog")
    base = game.figure()
    game.start()
    for letter in "xyz":
        game.guess_letter(letter)
    game.reset(_Words("dog"))
    assert game.current_word == "dog"
    assert game.attempts_left == 6
    assert game.guessed_letters == ""
    assert game.figure() == base
    assert game.tries == 2


def test_start_counts_tries():
    game, out, _ = _game("cat")
    game.start()
    assert game.tries == 1
    assert "Welcome to the Hangman Game!" in out.getvalue()


def test_statistics_report_time_and_word():
    game, out, clock = _game("cat")
    game.start()
    game.guess_letter("a")
    clock.now = 42.0
    game.show_statistics()
    text = out.getvalue()
    assert "Game time: 42 seconds." in text
    assert "Attempts: 1" in text
    assert "The word was: cat" in text


def test_guessed_letters_listed():
    game, out, _ = _game("cat")
    game.guess_letter("a")
    game.guess_letter("b")
    game.show_guessed_letters()
    assert out.getvalue().endswith("Your guessed letters: a, b\n")


def test_current_state_line():
    game, out, _ = _game("cat")
    game.guess_letter("t")
    game.show_current_state()
    assert "Current word: _ _ t Your guessed letters: t" in out.getvalue()


def test_finish_win():
    game, out, _ = _game("cat")
    for letter in "cat":
        game.guess_letter(letter)
    game.finish()
    assert "Congratulations! You guessed the word: cat" in out.getvalue()


def test_finish_loss():
    game, out, _ = _game("cat")
    for letter in "bdefgh":
        game.guess_letter(letter)
    game.finish()
    text = out.getvalue()
    assert "Game Over!" in text
    assert "You ran out of attempts!" in text
    assert "Congratulations" not in text