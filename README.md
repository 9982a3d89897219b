# gallows

A console Hangman game. The computer chooses a word at random from a word
list that is stored encrypted with a Caesar cipher. You guess the word one
letter at a time before the gallows figure is complete.

## Installing

```
pip install .
```

## Playing

Put a `words.json` file in the current directory:

```json
{"words": ["dssoh", "edqdqd", "fkhuub"]}
```

Every word is stored with each letter shifted forward by three places. The
example above holds `apple`, `banana` and `cherry`. Then start the game:

```
gallows
```

The command takes two optional arguments:

- `path`: the word file to read. The default is `words.json`.
- `--shift N`: the cipher shift the file was written with. The default is 3.

How a game goes:

- Menus are driven with the Up and Down arrow keys. Enter chooses the
  highlighted option.
- At the start of each round you can choose to have letters opened for you.
  This reveals the first two vowels of the word, or only one if the word has
  a single vowel.
- Type one letter at a time. Guesses ignore case. Anything that is not an
  English letter is rejected, and a letter you already guessed costs
  nothing.
- You have six wrong guesses. Each one adds a part to the figure: head,
  body, left arm, right arm, left leg, right leg.
- When the round ends, the game shows the figure, the outcome, the time
  played in whole seconds, an attempts counter, the word, and the letters you
  guessed. Press any key, then choose to play again or exit. The attempts
  counter goes up by one whenever a round is started and whenever the game
  is reset for a new word.

If the word file cannot be opened, an error is printed to standard error and
the word list stays empty. The command then prints
`Error loading words: No words available in the list.` and exits with
status 1. Any other failure is reported on the same `Error loading words:`
line and also exits with status 1.

## Using it as a library

```python
from gallows.cipher import caesar_encrypt, caesar_decrypt, decrypt_words

caesar_encrypt("apple", 3)              # "dssoh"
caesar_decrypt("dssoh", 3)              # "apple"
decrypt_words(["dssoh", "edqdqd"], 3)   # ["apple", "banana"]
```

The cipher shifts only the ASCII letters A–Z and a–z and keeps their case.
Every other character is left as it is.

- `gallows.words.WordList(path, shift=3)` reads `{"words": [...]}` from a
  JSON file and decrypts it into its `words` attribute. `load()` reads the
  file again. `random_word(rng=None)` returns a random word. It takes an
  optional `random.Random` and raises `RuntimeError` when the list is empty.
  A `words` value that is not a list of strings raises `TypeError`.
- `gallows.game.HangmanGame(words, out=None, clock=time.monotonic)` holds one
  game. This covers `current_word`, `guessed_letters`, `attempts_left` and
  `tries`, with the methods `start()`, `reset(words)`, `guess_letter(letter)`,
  `is_game_over()`, `is_word_guessed()` and `open_two_letters()`.
  `figure()` returns the drawing as lines and `masked_word()` returns the
  word with unguessed letters as `_`. The `show_*` methods and `finish()`
  write to `out`, which defaults to standard output.
- `gallows.console.show_menu(options, prompt, read=None, out=None, clear=None)`
  runs the arrow-key menu and returns the chosen index. `read_key()`,
  `clear_screen()` and `pause()` are the terminal helpers it uses by default.
  The `Key` enum lists the key codes.
- `gallows.cli.run(words, read=None, out=None, clear=None, delay=1.0)` plays
  rounds until the player exits. Input, output, screen clearing and the pause
  after each guess are all passed in, so a session can run without a
  terminal.

## What it does not do

The package does not include a command for writing or editing word files.
To make one, encrypt the words with `caesar_encrypt` and save them yourself
as `{"words": [...]}`.

## Tests

```
pip install .[test]
pytest
```