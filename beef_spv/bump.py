"""
BSV Unified Merkle Path (BUMP): parsing, serialisation and root calculation.

A BUMP lists, level by level, the nodes needed to climb from one or more
transactions in a block to the block's merkle root. Level 0 holds the
transactions themselves; every level above holds intermediate hashes.
"""
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from bsv.hash import hash256
from bsv.utils import unsigned_to_varint

from beef_spv.errors import DecodeError, StructuralError
from beef_spv.oracle import MerkleRootConfirmationRequestItem
from beef_spv.utils.encoding import ByteReader, hex_to_wire

logger = logging.getLogger(__name__)

MAX_TREE_HEIGHT = 64


class LeafFlag(IntEnum):
    DATA = 0
    DUPLICATE = 1
    TXID = 2


@dataclass
class BUMPLeaf:
    """One node of a merkle path. `hash` is display-order hex, None for duplicates."""
    offset: int
    flag: LeafFlag
    hash: Optional[str] = None

    @property
    def duplicate(self) -> bool:
        return self.flag == LeafFlag.DUPLICATE

    @property
    def txid(self) -> bool:
        return self.flag == LeafFlag.TXID

    def to_dict(self) -> dict:
        data = {'offset': self.offset}
        if self.duplicate:
            data['duplicate'] = True
        else:
            data['hash'] = self.hash
        if self.txid:
            data['txid'] = True
        return data


def merkle_tree_parent(left: str, right: str) -> str:
    """Parent of two display-order hashes, in display order."""
    concatenated = hex_to_wire(left) + hex_to_wire(right)
    return hash256(concatenated)[::-1].hex()


class BUMP:
    def __init__(self, block_height: int, path: list[list[BUMPLeaf]]):
        self.block_height = block_height
        self.path = path

    @property
    def tree_height(self) -> int:
        return len(self.path)

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'BUMP':
        block_height = reader.read_var_int("BUMP block height")
        tree_height = reader.read_uint8("BUMP tree height")
        if tree_height > MAX_TREE_HEIGHT:
            raise DecodeError(
                'tree-too-tall',
                f"invalid BEEF - treeHeight cannot be greater than {MAX_TREE_HEIGHT}, got {tree_height}"
            )

        path = []
        for _ in range(tree_height):
            n_leaves = reader.read_var_int("BUMP leaf count")
            level = []
            for _ in range(n_leaves):
                offset = reader.read_var_int("BUMP leaf offset")
                raw_flag = reader.read_uint8("BUMP leaf flag")
                try:
                    flag = LeafFlag(raw_flag)
                except ValueError:
                    raise DecodeError('bad-leaf-flag', f"invalid BEEF - unknown BUMP leaf flag {raw_flag}")
                leaf_hash = None
                if flag != LeafFlag.DUPLICATE:
                    leaf_hash = reader.read_hash("BUMP leaf hash")
                level.append(BUMPLeaf(offset, flag, leaf_hash))
            path.append(level)

        return cls(block_height, path)

    def to_bytes(self) -> bytes:
        out = bytearray(unsigned_to_varint(self.block_height))
        out.append(self.tree_height)
        for level in self.path:
            out += unsigned_to_varint(len(level))
            for leaf in level:
                out += unsigned_to_varint(leaf.offset)
                out.append(int(leaf.flag))
                if not leaf.duplicate:
                    out += hex_to_wire(leaf.hash)
        return bytes(out)

    def validate(self):
        """Reject paths that cannot describe a well-formed climb."""
        if not self.path or not self.path[0]:
            raise StructuralError('bump-malformed', "invalid BUMP - empty path")

        for height, level in enumerate(self.path):
            seen = set()
            for leaf in level:
                if leaf.offset in seen:
                    raise StructuralError(
                        'bump-malformed',
                        f"invalid BUMP - offset {leaf.offset} repeated at level {height}"
                    )
                seen.add(leaf.offset)
                if height > 0 and leaf.txid:
                    raise StructuralError(
                        'bump-malformed',
                        f"invalid BUMP - txid flag above the base level at level {height}"
                    )
                if height == 0 and leaf.offset == 0 and leaf.duplicate:
                    raise StructuralError('duplicate-at-zero')

    def contains_txid(self, txid: str) -> bool:
        return any(leaf.hash == txid for leaf in self.path[0]) if self.path else False

    def txids(self) -> list[str]:
        return [leaf.hash for leaf in self.path[0] if leaf.txid] if self.path else []

    def calculate_merkle_root(self) -> str:
        """
        Climb from every txid leaf of the base level to the root.

        All climbs must meet at the same root. A path without txid leaves is
        climbed from its first non-duplicate base leaf.
        """
        self.validate()

        starts = [leaf for leaf in self.path[0] if leaf.txid]
        if not starts:
            starts = [leaf for leaf in self.path[0] if not leaf.duplicate][:1]
        if not starts:
            raise StructuralError('bump-malformed', "invalid BUMP - base level holds only duplicates")

        index = [{leaf.offset: leaf for leaf in level} for level in self.path]

        root = None
        for leaf in starts:
            candidate = self._climb(leaf, index)
            if root is None:
                root = candidate
            elif candidate != root:
                logger.debug(f"BUMP at height {self.block_height}: {leaf.hash} climbs to {candidate}, expected {root}")
                raise StructuralError(
                    'bump-internal-mismatch',
                    f"different merkle roots for block {self.block_height}"
                )
        return root

    def _climb(self, leaf: BUMPLeaf, index: list[dict]) -> str:
        working = leaf.hash
        offset = leaf.offset
        for height in range(self.tree_height):
            sibling = self._node(height, offset ^ 1, index)
            if sibling is None:
                sibling = working
            if offset % 2:
                working = merkle_tree_parent(sibling, working)
            else:
                working = merkle_tree_parent(working, sibling)
            offset //= 2
        return working

    def _node(self, height: int, offset: int, index: list[dict]) -> Optional[str]:
        """
        Hash of the node at (height, offset); None when it is a duplicate of its pair.
        Nodes absent from the path are rebuilt from their children.
        """
        leaf = index[height].get(offset)
        if leaf is not None:
            return None if leaf.duplicate else leaf.hash
        if height == 0:
            raise StructuralError(
                'bump-malformed',
                f"invalid BUMP - missing leaf at offset {offset} of the base level"
            )

        left = self._node(height - 1, offset * 2, index)
        right = self._node(height - 1, offset * 2 + 1, index)
        if left is None and right is None:
            raise StructuralError(
                'bump-malformed',
                f"invalid BUMP - cannot rebuild node {offset} at level {height}"
            )
        return merkle_tree_parent(left or right, right or left)

    def get_merkle_root_request(self) -> MerkleRootConfirmationRequestItem:
        return MerkleRootConfirmationRequestItem(
            merkle_root=self.calculate_merkle_root(),
            block_height=self.block_height,
        )

    def to_dict(self) -> dict:
        return {
            'blockHeight': self.block_height,
            'path': [[leaf.to_dict() for leaf in level] for level in self.path],
        }

    def __eq__(self, other):
        if not isinstance(other, BUMP):
            return NotImplemented
        return self.block_height == other.block_height and self.path == other.path

    def __repr__(self):
        return f"BUMP(block_height={self.block_height}, tree_height={self.tree_height})"
