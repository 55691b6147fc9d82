from lexical_analyzer.tokenizer import Token, Tokenizer


def test_token_text_and_truthiness():
    assert str(Token("cat")) == "cat"
    assert Token("cat")
    assert not Token("")
    assert Token("cat") == Token("cat")


def test_empty_input():
    tokenizer = Tokenizer("  \n\t ")
    assert tokenizer.is_empty()
    assert tokenizer.first() is None
    assert tokenizer.next() is None
    assert list(tokenizer) == []


def test_first_and_next_walk_tokens_in_order():
    tokenizer = Tokenizer("cat  dog\nbird")
    assert not tokenizer.is_empty()
    assert tokenizer.first() == Token("cat")
    assert tokenizer.next() == Token("dog")
    assert tokenizer.next() == Token("bird")
    assert tokenizer.next() is None
    assert tokenizer.next() is None


def test_first_restarts_iteration():
    tokenizer = Tokenizer("a b")
    tokenizer.first()
    tokenizer.next()
    assert tokenizer.first() == Token("a")
    assert tokenizer.next() == Token("b")


def test_exhaustion_is_distinct_from_empty_token():
    tokenizer = Tokenizer.from_tokens(["", "cat"])
    assert tokenizer.first() == Token("")
    assert tokenizer.next() == Token("cat")
    assert tokenizer.next() is None


def test_custom_pattern_and_lowercase():
    tokenizer = Tokenizer("Cat, DOG; bird!", pattern=r"[a-z]+", lowercase=True)
    assert [token.text for token in tokenizer] == ["cat", "dog", "bird"]
    assert len(tokenizer) == 3
