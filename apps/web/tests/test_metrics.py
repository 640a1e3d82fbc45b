from fastapi.testclient import TestClient

from writewell_web.application import create_app
from writewell_web.config import Settings
from writewell_web.metrics import count_sentences, count_words, readability_score, writing_metrics


def test_counts():
    assert count_words("  one two\tthree\nfour ") == 4
    assert count_words("") == 0
    assert count_sentences("First one. Second one! Third?") == 3
    assert count_sentences("No terminator") == 1
    assert count_sentences("") == 0


def test_readability_is_clamped():
    assert readability_score(0) == 100
    assert readability_score(15) == 100
    assert readability_score(20) == 75
    assert readability_score(40) == 0


def test_writing_metrics_rounds_half_up():
    # 5 words / 2 sentences = 2.5 -> 3
    assert writing_metrics("One two three. Four five")["avg_words_per_sentence"] == 3


def test_empty_text():
    assert writing_metrics("") == {
        "words": 0,
        "sentences": 0,
        "avg_words_per_sentence": 0,
        "readability": 100,
    }


def test_metrics_endpoint():
    client = TestClient(create_app(Settings()))
    text = " ".join(["word"] * 20) + "."

    body = client.post("/api/metrics", json={"text": text}).json()

    assert body == {"words": 20, "sentences": 1, "avg_words_per_sentence": 20, "readability": 75}


def test_metrics_endpoint_null_text():
    client = TestClient(create_app(Settings()))

    body = client.post("/api/metrics", json={"text": None}).json()

    assert body == {"words": 0, "sentences": 0, "avg_words_per_sentence": 0, "readability": 100}
