import pytest

from pazzfraze.errors import ConstructionError, EmptyWordListError
from pazzfraze.wordlist import WordList, load_wordlist


def test_parse():
    words = WordList("  alpha   beta\ngamma\t\tdelta ")
    assert len(words) == 4
    assert list(words) == ["alpha", "beta", "gamma", "delta"]
    assert words.word(2) == "gamma"
    assert words[3] == "delta"


def test_spans():
    text = "one  two\r\nthree　four"
    words = WordList(text)
    assert list(words) == ["one", "two", "three", "four"]
    for (start, length), word in zip(words.spans, words):
        assert text[start:start + length] == word
    assert words.text is text


@pytest.mark.parametrize("text", ["", "   \n\t  ", "　\r\n"])
def test_empty(text):
    with pytest.raises(EmptyWordListError):
        WordList(text)


def test_error_taxonomy():
    assert issubclass(EmptyWordListError, ConstructionError)
    assert issubclass(EmptyWordListError, ValueError)


def test_from_file(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text("žluťoučký\nkůň\n", encoding='utf-8')
    words = WordList.from_file(path)
    assert list(words) == ["žluťoučký", "kůň"]
    path.write_text("\n\n", encoding='utf-8')
    with pytest.raises(EmptyWordListError):
        WordList.from_file(path)


def test_bundled_wordlist():
    load_wordlist.cache_clear()  # clear lru_cache
    words = load_wordlist()
    assert load_wordlist() is words
    assert len(words) == 2048, "11 bits per word"
    for word in words:
        assert isinstance(word, str)
        assert len(word) > 0
        assert not any(c.isspace() for c in word)
    assert len(set(words)) == len(words), "no duplicate words"
