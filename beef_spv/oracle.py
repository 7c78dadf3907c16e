"""
Merkle root oracle interface.

SPV ends by asking an oracle whether each computed (merkle root, block height)
pair belongs to the longest chain. The oracle is injected by the caller; this
module defines its contract and an in-memory known-answer implementation.
"""
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass

import msgpack

from beef_spv.errors import OracleError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MerkleRootConfirmationRequestItem:
    merkle_root: str
    block_height: int

    def to_dict(self) -> dict:
        return {'merkleRoot': self.merkle_root, 'blockHeight': self.block_height}

    @classmethod
    def from_dict(cls, data: dict) -> 'MerkleRootConfirmationRequestItem':
        return cls(merkle_root=data['merkleRoot'], block_height=int(data['blockHeight']))


class MerkleRootVerifier(ABC):
    """Confirms that merkle roots belong to blocks on the longest chain."""

    @abstractmethod
    async def verify_merkle_roots(self, items: list[MerkleRootConfirmationRequestItem]) -> None:
        """
        Return None when every item is confirmed.

        Raises:
            OracleError: 'merkle-root-mismatch' when any item is rejected,
                'oracle-unavailable' when the answer cannot be obtained.
        """


class MerkleRootTable(MerkleRootVerifier):
    """Known-answer oracle backed by a {block height: merkle root} table."""

    def __init__(self, roots: dict = None):
        self.roots = dict(roots or {})

    def add(self, block_height: int, merkle_root: str):
        self.roots[block_height] = merkle_root

    async def verify_merkle_roots(self, items: list[MerkleRootConfirmationRequestItem]) -> None:
        for item in items:
            known = self.roots.get(item.block_height)
            if known != item.merkle_root:
                logger.debug(
                    f"Root {item.merkle_root} at height {item.block_height} rejected (table has {known})"
                )
                raise OracleError(
                    'merkle-root-mismatch',
                    f"merkle root {item.merkle_root} is not confirmed at height {item.block_height}"
                )

    def to_bytes(self) -> bytes:
        return msgpack.packb(self.roots, use_bin_type=True)

    @classmethod
    def from_bytes(cls, data: bytes) -> 'MerkleRootTable':
        roots = msgpack.unpackb(data, raw=False, strict_map_key=False)
        return cls({int(height): root for height, root in roots.items()})

    def save(self, path: str):
        os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
        with open(path, 'wb') as f:
            f.write(self.to_bytes())
        logger.info(f"Saved {len(self.roots)} merkle roots to {path}")

    @classmethod
    def load(cls, path: str) -> 'MerkleRootTable':
        with open(path, 'rb') as f:
            table = cls.from_bytes(f.read())
        logger.info(f"Loaded {len(table.roots)} merkle roots from {path}")
        return table
