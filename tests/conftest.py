import pytest

from textdoc import Document


@pytest.fixture()
def doc():
    return Document("test", "nobody", "A bunch of words")
