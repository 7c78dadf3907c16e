"""
Per-transaction checks run before SPV trusts an envelope.

Every transaction must have inputs and outputs and be final. Transactions
without a merkle proof are additionally fee checked and have every input's
unlocking script run against its parent's locking script.
"""
import logging

from bsv import Transaction
from bsv.script.spend import Spend

from beef_spv.beef import TxData
from beef_spv.errors import ChainError, TransactionError

logger = logging.getLogger(__name__)

MAX_SEQUENCE = 0xFFFFFFFF


def validate_transaction(tx_data: TxData, transactions: dict[str, TxData], verify_scripts: bool = True):
    tx = tx_data.transaction
    if not tx.inputs:
        raise TransactionError('no-inputs', tx_id=tx_data.tx_id)
    if not tx.outputs:
        raise TransactionError('no-outputs', tx_id=tx_data.tx_id)

    validate_lock_time(tx)

    if tx_data.unmined:
        validate_satoshis_sum(tx, transactions)
        if verify_scripts:
            validate_scripts(tx, transactions)


def validate_lock_time(tx: Transaction):
    """A non-zero lock time is accepted only when every input is final."""
    if tx.locktime == 0:
        return
    for input_index, tx_in in enumerate(tx.inputs):
        if tx_in.sequence != MAX_SEQUENCE:
            raise TransactionError('non-final-locktime', tx_id=tx.txid(), input_index=input_index)


def _spent_output(tx: Transaction, input_index: int, transactions: dict[str, TxData]):
    tx_in = tx.inputs[input_index]
    parent = transactions.get(tx_in.source_txid)
    if parent is None:
        raise ChainError('missing-parent', tx_id=tx.txid(), input_index=input_index)

    outputs = parent.transaction.outputs
    if tx_in.source_output_index >= len(outputs):
        raise ChainError(
            'missing-parent',
            f"parent {parent.tx_id} has no output {tx_in.source_output_index}",
            tx_id=tx.txid(),
            input_index=input_index,
        )
    return outputs[tx_in.source_output_index]


def validate_satoshis_sum(tx: Transaction, transactions: dict[str, TxData]):
    input_sum = sum(_spent_output(tx, i, transactions).satoshis for i in range(len(tx.inputs)))
    output_sum = sum(tx_out.satoshis for tx_out in tx.outputs)

    if input_sum <= output_sum:
        logger.debug(f"{tx.txid()}: inputs {input_sum} sat, outputs {output_sum} sat")
        raise TransactionError('fee-not-positive', tx_id=tx.txid())


def validate_scripts(tx: Transaction, transactions: dict[str, TxData]):
    for input_index, tx_in in enumerate(tx.inputs):
        spent = _spent_output(tx, input_index, transactions)
        other_inputs = [other for j, other in enumerate(tx.inputs) if j != input_index]

        spend = Spend({
            'sourceTXID': tx_in.source_txid,
            'sourceOutputIndex': tx_in.source_output_index,
            'sourceSatoshis': spent.satoshis,
            'lockingScript': spent.locking_script,
            'transactionVersion': tx.version,
            'otherInputs': other_inputs,
            'inputIndex': input_index,
            'unlockingScript': tx_in.unlocking_script,
            'outputs': tx.outputs,
            'inputSequence': tx_in.sequence,
            'lockTime': tx.locktime,
        })
        try:
            valid = spend.validate()
        except (RuntimeError, ValueError) as e:
            logger.debug(f"{tx.txid()} input {input_index}: {e}")
            valid = False

        if not valid:
            raise TransactionError('script-failed', tx_id=tx.txid(), input_index=input_index)
