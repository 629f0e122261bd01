from script import fetch_dictionary as fd


class _Resp:
    def __init__(self, text, content_type):
        self.text = text
        self.headers = {"Content-Type": content_type}

    def raise_for_status(self):
        pass


def test_extract_words_dedupes_and_filters():
    text = "The cat, the DOG; a cat-nap! x42 elephant"
    assert fd.extract_words(text, min_length=3) == ["the", "cat", "dog", "nap", "elephant"]
    assert fd.extract_words(text, min_length=3, max_length=3) == ["the", "cat", "dog", "nap"]


def test_page_text_strips_html():
    html = "<html><body><ul><li>apple</li><li>Berry</li></ul><script></script></body></html>"
    assert fd.page_text(html, "text/html; charset=utf-8").split() == ["apple", "Berry"]
    assert fd.page_text("<b>raw</b>", "text/plain") == "<b>raw</b>"


def test_fetch_words(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return _Resp("<p>Hangman words: crane crane slate</p>", "text/html")

    monkeypatch.setattr(fd.requests, "get", fake_get)
    assert fd.fetch_words("http://example.test/words", min_length=4) == [
        "hangman", "words", "crane", "slate"]
    assert calls == ["http://example.test/words"]
