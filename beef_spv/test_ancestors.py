"""
Tests for walking the subject's inputs back to mined ancestors.
"""
import pytest

from beef_spv.ancestors import ensure_ancestors_are_present_in_bumps, find_mined_ancestors
from beef_spv.beef import decode_beef
from beef_spv.errors import ChainError
from beef_spv.vectors import VALID_BEEF, WRONG_BUMP_BEEF, make_envelope, make_tx


@pytest.fixture
def chain():
    """mined <- first <- second <- subject, each spending output 0 of the previous."""
    mined = make_tx(outputs=(5000,))
    first = make_tx([(mined, 0)], outputs=(4000,))
    second = make_tx([(first, 0)], outputs=(3000,))
    subject = make_tx([(second, 0)], outputs=(2000,))
    return mined, first, second, subject


def test_mined_parents_of_valid_beef():
    decoded = decode_beef(VALID_BEEF)
    ancestors = find_mined_ancestors(decoded.get_latest_tx(), decoded.transactions_by_id())
    assert set(ancestors) == {tx.tx_id for tx in decoded.transactions[:-1]}
    assert all(not tx.unmined for tx in ancestors.values())


def test_unmined_parents_are_expanded(chain):
    mined, first, second, subject = chain
    decoded = make_envelope([mined], [first, second, subject])

    ancestors = find_mined_ancestors(subject, decoded.transactions_by_id())
    assert list(ancestors) == [mined.txid()]


def test_mined_parent_is_not_expanded():
    # the mined parent's own funding input is not in the envelope
    mined = make_tx(outputs=(5000,))
    subject = make_tx([(mined, 0)])
    decoded = make_envelope([mined], [subject])

    assert list(find_mined_ancestors(subject, decoded.transactions_by_id())) == [mined.txid()]


def test_shared_ancestor_visited_once():
    mined = make_tx(outputs=(5000,))
    middle = make_tx([(mined, 0)], outputs=(2000, 2000))
    subject = make_tx([(middle, 0), (middle, 1)])
    decoded = make_envelope([mined], [middle, subject])

    assert list(find_mined_ancestors(subject, decoded.transactions_by_id())) == [mined.txid()]


def test_missing_parent(chain):
    mined, first, second, subject = chain
    decoded = make_envelope([mined], [second, subject])

    with pytest.raises(ChainError) as exc:
        find_mined_ancestors(subject, decoded.transactions_by_id())
    assert exc.value.tag == 'missing-parent'
    assert exc.value.tx_id == second.txid()
    assert exc.value.input_index == 0


def test_depth_limit():
    mined = make_tx(outputs=(10000,))
    txs = []
    parent = mined
    for _ in range(5):
        parent = make_tx([(parent, 0)], outputs=(1000,))
        txs.append(parent)
    subject = make_tx([(parent, 0)], outputs=(500,))
    lookup = make_envelope([mined], txs + [subject]).transactions_by_id()

    assert list(find_mined_ancestors(subject, lookup, max_depth=5)) == [mined.txid()]
    with pytest.raises(ChainError) as exc:
        find_mined_ancestors(subject, lookup, max_depth=4)
    assert exc.value.tag == 'missing-parent'
    assert "deeper than 4" in exc.value.message


class TestAncestorsInBumps:
    def test_valid_beef(self):
        ensure_ancestors_are_present_in_bumps(decode_beef(VALID_BEEF))

    def test_synthetic_envelope(self, chain):
        mined, first, second, subject = chain
        ensure_ancestors_are_present_in_bumps(make_envelope([mined], [first, second, subject]))

    def test_ancestor_missing_from_named_bump(self):
        decoded = decode_beef(WRONG_BUMP_BEEF)
        parent = decoded.transactions[0]

        with pytest.raises(ChainError) as exc:
            ensure_ancestors_are_present_in_bumps(decoded)
        assert exc.value.tag == 'ancestor-not-in-bump'
        assert exc.value.tx_id == parent.tx_id
        assert exc.value.bump_index == 0
        assert exc.value.to_dict()['code'] == "error-spv-bump-ancestor-not-present"
