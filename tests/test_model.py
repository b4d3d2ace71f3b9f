import dataclasses

import pytest

from sss_core import CreationScheme, InvalidArgumentError, RecoveryScheme, Share


def test_share_is_immutable_and_hashable():
    share = Share(index=1, value=3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        share.value = 4  # type: ignore[misc]
    assert {share, Share(index=1, value=3)} == {share}


def test_shares_order_by_index():
    shares = [Share(index=3, value=0), Share(index=1, value=9), Share(index=2, value=5)]
    assert [s.index for s in sorted(shares)] == [1, 2, 3]


@pytest.mark.parametrize("index, value", [(0, 1), (-1, 1), (1, -1), (None, 1), (1, "2")])
def test_share_rejects_invalid_fields(index, value):
    with pytest.raises(InvalidArgumentError):
        Share(index=index, value=value)


def test_creation_scheme_valid():
    scheme = CreationScheme(required_share_count=2, total_share_count=3, prime=7)
    assert (scheme.required_share_count, scheme.total_share_count, scheme.prime) == (2, 3, 7)


@pytest.mark.parametrize(
    "required, total, prime",
    [(0, 3, 7), (3, 2, 7), (2, 3, 1), (None, 3, 7), (2, None, 7), (2, 3, None), (True, 3, 7)],
)
def test_creation_scheme_rejects_invalid(required, total, prime):
    with pytest.raises(InvalidArgumentError):
        CreationScheme(required_share_count=required, total_share_count=total, prime=prime)


@pytest.mark.parametrize("required, prime", [(0, 7), (2, 1), (None, 7), (2, None)])
def test_recovery_scheme_rejects_invalid(required, prime):
    with pytest.raises(InvalidArgumentError):
        RecoveryScheme(required_share_count=required, prime=prime)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        RecoveryScheme(required_share_count=0, prime=7)
