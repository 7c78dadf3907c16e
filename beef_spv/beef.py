"""
BEEF (Background Evaluation Extended Format) envelope codec.

Layout:
    version       2 bytes LE (01 00)
    marker        BE EF
    nBUMPs        VarInt, at least 1
    BUMPs         see bump.BUMP.from_reader
    nTransactions VarInt, at least 2
    transactions  raw transaction, then hasBump (00 | 01 + VarInt BUMP index)

Transactions appear parents first; the last one is the subject being paid.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

from bsv import Transaction
from bsv.utils import Reader, unsigned_to_varint

from beef_spv.bump import BUMP
from beef_spv.errors import DecodeError, StructuralError
from beef_spv.oracle import MerkleRootConfirmationRequestItem
from beef_spv.utils.encoding import ByteReader

logger = logging.getLogger(__name__)

BEEF_VERSION = 1
BEEF_MARKER = b'\xbe\xef'

HAS_NO_BUMP = 0x00
HAS_BUMP = 0x01


@dataclass
class TxData:
    transaction: Transaction
    bump_index: Optional[int] = None
    tx_id: str = field(init=False)

    def __post_init__(self):
        self.tx_id = self.transaction.txid()

    @property
    def unmined(self) -> bool:
        return self.bump_index is None

    def to_bytes(self) -> bytes:
        out = self.transaction.serialize()
        if self.unmined:
            return out + bytes([HAS_NO_BUMP])
        return out + bytes([HAS_BUMP]) + unsigned_to_varint(self.bump_index)

    def to_dict(self) -> dict:
        tx = self.transaction
        return {
            'txid': self.tx_id,
            'bumpIndex': self.bump_index,
            'version': tx.version,
            'lockTime': tx.locktime,
            'inputs': [
                {
                    'sourceTxid': tx_in.source_txid,
                    'sourceOutputIndex': tx_in.source_output_index,
                    'sequence': tx_in.sequence,
                }
                for tx_in in tx.inputs
            ],
            'outputs': [
                {'satoshis': tx_out.satoshis, 'lockingScript': tx_out.locking_script.hex()}
                for tx_out in tx.outputs
            ],
        }


class DecodedBEEF:
    def __init__(self, bumps: list[BUMP], transactions: list[TxData], version: int = BEEF_VERSION):
        self.version = version
        self.bumps = bumps
        self.transactions = transactions

    def get_latest_tx(self) -> Transaction:
        return self.transactions[-1].transaction

    def get_latest_tx_data(self) -> TxData:
        return self.transactions[-1]

    def transactions_by_id(self) -> dict[str, TxData]:
        """
        Index transactions by txid.
        When a txid appears more than once, an entry carrying a BUMP index wins.
        """
        lookup = {}
        for tx_data in self.transactions:
            existing = lookup.get(tx_data.tx_id)
            if existing is None or (existing.unmined and not tx_data.unmined):
                lookup[tx_data.tx_id] = tx_data
        return lookup

    def get_merkle_roots_request(self) -> list[MerkleRootConfirmationRequestItem]:
        """One request item per BUMP, in envelope order."""
        items = []
        for bump_index, bump in enumerate(self.bumps):
            try:
                items.append(bump.get_merkle_root_request())
            except StructuralError as e:
                raise StructuralError(e.tag, e.message, bump_index=bump_index) from e
        return items

    def to_bytes(self) -> bytes:
        out = bytearray(self.version.to_bytes(2, 'little'))
        out += BEEF_MARKER
        out += unsigned_to_varint(len(self.bumps))
        for bump in self.bumps:
            out += bump.to_bytes()
        out += unsigned_to_varint(len(self.transactions))
        for tx_data in self.transactions:
            out += tx_data.to_bytes()
        return bytes(out)

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    def to_dict(self) -> dict:
        return {
            'version': self.version,
            'bumps': [bump.to_dict() for bump in self.bumps],
            'transactions': [tx_data.to_dict() for tx_data in self.transactions],
        }


def decode_beef(beef_hex: str) -> DecodedBEEF:
    """
    Parse a hex BEEF envelope.

    Raises:
        DecodeError: on any malformed byte, with the tag naming the defect.
    """
    try:
        data = bytes.fromhex(beef_hex)
    except (ValueError, TypeError):
        raise DecodeError('invalid-hex')

    if len(data) < 4:
        raise DecodeError('short-envelope')

    reader = ByteReader(data)
    version = int.from_bytes(reader.read(2, "version"), 'little')
    if reader.read(2, "marker") != BEEF_MARKER:
        raise DecodeError('bad-marker')

    bumps = _decode_bumps(reader)
    transactions = _decode_transactions(reader, len(bumps))

    if not reader.eof():
        logger.warning(f"Ignoring {reader.remaining()} trailing bytes after the last BEEF transaction")

    logger.debug(f"Decoded BEEF v{version}: {len(bumps)} BUMPs, {len(transactions)} transactions")
    return DecodedBEEF(bumps, transactions, version=version)


def _decode_bumps(reader: ByteReader) -> list[BUMP]:
    n_bumps = reader.read_var_int("BUMP count")
    if n_bumps == 0:
        raise DecodeError('no-bumps')
    return [BUMP.from_reader(reader) for _ in range(n_bumps)]


def _decode_transactions(reader: ByteReader, n_bumps: int) -> list[TxData]:
    n_transactions = reader.read_var_int("transaction count")
    if n_transactions < 2:
        raise DecodeError('too-few-transactions')

    tx_reader = Reader(reader.data)
    transactions = []
    for i in range(n_transactions):
        tx_reader.seek(reader.position)
        try:
            tx = Transaction.from_reader(tx_reader)
        except (ValueError, TypeError) as e:
            raise DecodeError('truncated', f"invalid BEEF - cannot read transaction {i}: {e}")
        reader.position = tx_reader.tell()

        has_bump = reader.read_uint8("hasBump flag")
        if has_bump == HAS_NO_BUMP:
            bump_index = None
        elif has_bump == HAS_BUMP:
            bump_index = reader.read_var_int("BUMP index")
            if bump_index >= n_bumps:
                raise DecodeError(
                    'bad-bump-index',
                    f"invalid BEEF - transaction {i} names BUMP {bump_index} of {n_bumps}"
                )
        else:
            raise DecodeError('bad-hasbump-flag', f"invalid BEEF - unknown hasBump flag {has_bump}")

        transactions.append(TxData(tx, bump_index))
    return transactions


def encode_beef(decoded: DecodedBEEF) -> str:
    """Serialise a decoded envelope back to hex."""
    return decoded.to_hex()
