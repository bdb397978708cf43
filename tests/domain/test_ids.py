"""Unit tests for IdSequence."""

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.ids import IdSequence


class TestIdSequence:

    def test_starts_at_one_by_default(self):
        ids = IdSequence()
        assert ids.next() == 1
        assert ids.next() == 2

    def test_custom_start(self):
        assert IdSequence(100).next() == 100

    def test_peek_does_not_advance(self):
        ids = IdSequence()
        assert ids.peek == 1
        assert ids.peek == 1
        assert ids.next() == 1

    def test_advance_past_skips_used_ids(self):
        ids = IdSequence()
        ids.advance_past(7)
        assert ids.next() == 8

    def test_advance_past_never_goes_backwards(self):
        ids = IdSequence(10)
        ids.advance_past(3)
        assert ids.next() == 10

    @pytest.mark.parametrize("start", [0, -1, True, "1"])
    def test_invalid_start_rejected(self, start):
        with pytest.raises(ValidationError, match="positive integer"):
            IdSequence(start)
