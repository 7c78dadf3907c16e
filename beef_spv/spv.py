"""
Simplified payment verification of a BEEF envelope.

The envelope is trusted only when every transaction passes its checks, every
mined ancestor of the subject sits in the BUMP it names, and the oracle
confirms the merkle root of every BUMP.
"""
import asyncio
import logging
import time
from typing import Optional

from beef_spv.ancestors import ensure_ancestors_are_present_in_bumps
from beef_spv.beef import DecodedBEEF, decode_beef
from beef_spv.config import SPVConfig
from beef_spv.errors import DecodeError, OracleError, SPVError
from beef_spv.monitoring import SPVMonitor
from beef_spv.oracle import MerkleRootConfirmationRequestItem, MerkleRootVerifier
from beef_spv.validation import validate_transaction

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def execute_spv(beef_hex: str,
                      oracle: MerkleRootVerifier,
                      *,
                      cancel: Optional[asyncio.Event] = None,
                      config: Optional[SPVConfig] = None,
                      monitor: Optional[SPVMonitor] = None) -> None:
    """Decode `beef_hex` and verify it. Returns None or raises the first SPVError."""
    try:
        decoded = decode_beef(beef_hex)
    except DecodeError as e:
        logger.warning(f"BEEF rejected [{e.tag}]: {e}")
        if monitor is not None:
            monitor.record_verification(e.tag, 0.0)
        raise

    await execute_spv_decoded(decoded, oracle, cancel=cancel, config=config, monitor=monitor)


async def execute_spv_decoded(decoded: DecodedBEEF,
                              oracle: MerkleRootVerifier,
                              *,
                              cancel: Optional[asyncio.Event] = None,
                              config: Optional[SPVConfig] = None,
                              monitor: Optional[SPVMonitor] = None) -> None:
    config = config or SPVConfig()
    subject_id = decoded.get_latest_tx_data().tx_id
    started = time.monotonic()
    logger.info(f"Verifying BEEF for {subject_id}: {len(decoded.bumps)} BUMPs, {len(decoded.transactions)} transactions")

    try:
        lookup = decoded.transactions_by_id()
        for tx_data in decoded.transactions:
            validate_transaction(tx_data, lookup, verify_scripts=config.verify_scripts)

        ensure_ancestors_are_present_in_bumps(decoded, config.max_ancestor_depth)

        items = decoded.get_merkle_roots_request()
        await _confirm_merkle_roots(oracle, items, cancel, monitor)
    except SPVError as e:
        logger.warning(f"BEEF for {subject_id} rejected [{e.tag}]: {e}")
        if monitor is not None:
            monitor.record_verification(e.tag, time.monotonic() - started)
        raise

    if monitor is not None:
        monitor.record_verification('ok', time.monotonic() - started)
    logger.info(f"BEEF for {subject_id} verified")


async def _confirm_merkle_roots(oracle: MerkleRootVerifier,
                                items: list[MerkleRootConfirmationRequestItem],
                                cancel: Optional[asyncio.Event],
                                monitor: Optional[SPVMonitor]):
    """Single oracle round trip, abandoned as soon as `cancel` is set."""
    if cancel is not None and cancel.is_set():
        raise OracleError('cancelled')

    oracle_task = asyncio.ensure_future(oracle.verify_merkle_roots(items))
    try:
        if cancel is not None:
            cancel_task = asyncio.ensure_future(cancel.wait())
            try:
                await asyncio.wait({oracle_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)
            finally:
                cancel_task.cancel()
            if not oracle_task.done():
                _record_oracle(monitor, 'cancelled')
                raise OracleError('cancelled')

        try:
            await oracle_task
        except SPVError as e:
            _record_oracle(monitor, e.tag)
            raise
        except Exception as e:
            logger.error(f"Merkle root oracle failed: {e}")
            _record_oracle(monitor, 'oracle-unavailable')
            raise OracleError('oracle-unavailable', f"merkle root oracle failed: {e}")
    finally:
        if not oracle_task.done():
            oracle_task.cancel()

    _record_oracle(monitor, 'ok')


def _record_oracle(monitor: Optional[SPVMonitor], status: str):
    if monitor is not None:
        monitor.record_oracle_request(status)


def verify_beef(beef_hex: str, oracle: MerkleRootVerifier, **kwargs) -> None:
    """Blocking wrapper around execute_spv for callers without an event loop."""
    asyncio.run(execute_spv(beef_hex, oracle, **kwargs))
