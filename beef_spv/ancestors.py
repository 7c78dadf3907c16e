"""
Walks the input graph of the subject transaction back to its mined ancestors.
"""
import logging

from bsv import Transaction

from beef_spv.beef import DecodedBEEF, TxData
from beef_spv.errors import ChainError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ANCESTOR_DEPTH = 128


def find_mined_ancestors(tx: Transaction,
                         transactions: dict[str, TxData],
                         max_depth: int = DEFAULT_MAX_ANCESTOR_DEPTH) -> dict[str, TxData]:
    """
    Collect the nearest mined ancestors of `tx`.

    Mined parents are recorded and not expanded further; unmined parents are
    expanded in turn. Every input must resolve to a transaction in the envelope.

    Args:
        tx: the transaction whose inputs are walked.
        transactions: txid -> TxData lookup over the envelope.
        max_depth: how many unmined generations may be walked.

    Raises:
        ChainError('missing-parent'): an input's parent is absent, or the chain
            of unmined parents is deeper than `max_depth`.
    """
    mined = {}
    expanded = set()
    stack = [(tx, 0)]

    while stack:
        current, depth = stack.pop()
        current_id = current.txid()
        for input_index, tx_in in enumerate(current.inputs):
            parent = transactions.get(tx_in.source_txid)
            if parent is None:
                raise ChainError('missing-parent', tx_id=current_id, input_index=input_index)

            if not parent.unmined:
                mined[parent.tx_id] = parent
                continue

            if parent.tx_id in expanded:
                continue
            if depth + 1 > max_depth:
                raise ChainError(
                    'missing-parent',
                    f"unmined ancestry deeper than {max_depth} transactions",
                    tx_id=current_id,
                    input_index=input_index,
                )
            expanded.add(parent.tx_id)
            stack.append((parent.transaction, depth + 1))

    return mined


def ensure_ancestors_are_present_in_bumps(decoded: DecodedBEEF,
                                          max_depth: int = DEFAULT_MAX_ANCESTOR_DEPTH):
    """Every mined ancestor of the subject must appear in the BUMP it names."""
    subject = decoded.get_latest_tx()
    ancestors = find_mined_ancestors(subject, decoded.transactions_by_id(), max_depth)

    for tx_id, tx_data in ancestors.items():
        bump = decoded.bumps[tx_data.bump_index]
        if not bump.contains_txid(tx_id):
            raise ChainError('ancestor-not-in-bump', tx_id=tx_id, bump_index=tx_data.bump_index)

    logger.debug(f"{len(ancestors)} mined ancestors of {subject.txid()} found in BUMPs")
