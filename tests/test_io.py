import io
import logging

import pytest

from thetasort.errors import MalformedInputError
from thetasort.model.io import ingest, read_floats
from thetasort.model.vector import Vector2D


def test_ingest(five_vectors):
    stream = io.StringIO("1 1\n1 2\n1 3\n1 4\n1 5")
    assert ingest(stream) == five_vectors


def test_ingest_ignores_line_layout():
    stream = io.StringIO("  1\t2 3\n\n   4  \n-5.5e1 .25")
    assert ingest(stream) == [Vector2D(1, 2), Vector2D(3, 4), Vector2D(-55.0, 0.25)]


def test_odd_token_count_fails():
    with pytest.raises(MalformedInputError, match="mismatched vector elements"):
        ingest(io.StringIO("1 1\n1 2\n1"))


def test_malformed_input_is_a_value_error():
    with pytest.raises(ValueError):
        ingest(io.StringIO("7"))


@pytest.mark.parametrize("text", ["", "   \n\t\n"])
def test_empty_input(text):
    assert ingest(io.StringIO(text)) == []


def test_trailing_garbage_is_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger="thetasort"):
        vectors = ingest(io.StringIO("1 2\n3 4\nend of data 5 6"))
    assert vectors == [Vector2D(1, 2), Vector2D(3, 4)]
    assert "end" in caplog.text


def test_odd_count_before_garbage_fails():
    with pytest.raises(MalformedInputError):
        ingest(io.StringIO("1 2 3 oops 4"))


def test_words_and_underscores_stop_reading():
    assert list(read_floats(io.StringIO("1 2 nan 3"))) == [1.0, 2.0]
    assert list(read_floats(io.StringIO("1_000 2"))) == [1.0]


def test_number_followed_by_text_keeps_the_number():
    stream = io.StringIO("1 2 3 4abc 5 6")
    assert ingest(stream) == [Vector2D(1, 2), Vector2D(3, 4)]


def test_number_followed_by_text_counts_toward_odd_total():
    with pytest.raises(MalformedInputError):
        ingest(io.StringIO("1 2 3abc"))


def test_partial_token_reads_leading_number():
    assert list(read_floats(io.StringIO("-1.5e2x 7"))) == [-150.0]
