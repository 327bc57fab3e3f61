import numpy as np
import pytest

import formtok
from _formtok.location import SourceLocation, line_starts, locate


def test_line_starts():
    assert np.array_equal(line_starts("ab\ncd\n\ne"), [0, 3, 6, 7])


def test_line_starts_empty():
    assert np.array_equal(line_starts(""), [0])


@pytest.mark.parametrize(
    "position, lineno, col_offset",
    [(0, 1, 1), (2, 1, 3), (3, 2, 1), (5, 2, 3), (6, 3, 1), (7, 4, 1), (8, 4, 2)],
)
def test_locate(position, lineno, col_offset):
    assert locate("ab\ncd\n\ne", position) == SourceLocation(
        lineno, col_offset, position
    )


def test_locate_with_precomputed_starts():
    source = "(a\n  (b))"
    starts = line_starts(source)
    assert str(locate(source, 5, starts)) == "2:3"


@pytest.mark.parametrize("position", [-1, 4])
def test_locate_outside_source(position):
    with pytest.raises(ValueError, match="outside of source"):
        locate("abc", position)


def test_lex_error_location():
    source = "(a\n  ((b)))"
    with pytest.raises(formtok.LexError) as err:
        formtok.tokenize(source)
    assert err.value.position == 6
    assert err.value.locate(source) == SourceLocation(2, 4, 6)


def test_eof_token_location():
    source = "(a)\n"
    eof = formtok.tokenize(source)[-1]
    assert str(locate(source, eof.position)) == "2:1"
