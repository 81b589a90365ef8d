from lucid.tokenizer import tokenize


def test_splits_lines_and_words():
    assert tokenize("let x = 10\nlet y = x + 5") == [
        ['let', 'x', '=', '10'],
        ['let', 'y', '=', 'x', '+', '5'],
    ]


def test_trims_and_drops_blank_lines():
    assert tokenize("\n  let x = 1  \n\n") == [['let', 'x', '=', '1']]


def test_runs_of_whitespace_are_one_separator():
    assert tokenize("a \t  +\tb") == [['a', '+', 'b']]


def test_crlf_line_endings():
    assert tokenize("a\r\nb  c\r\n") == [['a'], ['b', 'c']]


def test_empty_and_whitespace_only_sources():
    assert tokenize("") == []
    assert tokenize("   \n\t\n  ") == []


def test_punctuation_stays_attached_to_words():
    assert tokenize("func add(a, b) { return a + b }") == [
        ['func', 'add(a,', 'b)', '{', 'return', 'a', '+', 'b', '}'],
    ]
