"""
Tests for BUMP parsing and merkle root calculation.
"""
import unittest

import pytest

from beef_spv.beef import decode_beef
from beef_spv.bump import BUMP, BUMPLeaf, LeafFlag, merkle_tree_parent
from beef_spv.errors import DecodeError, StructuralError
from beef_spv.utils.encoding import ByteReader
from beef_spv.vectors import VALID_BEEF, VALID_BEEF_ROOTS, SOMEONE_ELSE_BEEF, TOO_MUCH_BEEF, BLOCK_814414_ROOT

A = "11" * 32
B = "22" * 32
C = "33" * 32
D = "44" * 32
X = "55" * 32
Z = "66" * 32

AB = "ba982c0808a9a03c4e958ae612516f85faac3780dcb34d9ab83ceeaf74b54011"
CD = "64707bb057e94d73ac2fdc0f5446cb9e2406db0c91d5852e371598e4c6f78c92"
ROOT_ABCD = "94f4bc8f37716b47234bcfa62a03b2c75ae43c28c52244d38777d48504a28523"
ROOT_AB_CC = "e6f5f3a082e7117eca9f5b077b5f9e08a64c213c92f4b6377af3825e5c89cdca"
ROOT_ABCD_X = "e2a9c6617da457ce68cab29e999e1e81cf3378c702da81e7b328f8c57c2f31dc"


def txid(offset, hash_hex):
    return BUMPLeaf(offset, LeafFlag.TXID, hash_hex)


def data(offset, hash_hex):
    return BUMPLeaf(offset, LeafFlag.DATA, hash_hex)


def dup(offset):
    return BUMPLeaf(offset, LeafFlag.DUPLICATE)


def test_merkle_tree_parent_known_answer():
    assert merkle_tree_parent(A, B) == AB
    assert merkle_tree_parent(C, D) == CD
    assert merkle_tree_parent(AB, CD) == ROOT_ABCD


class TestMerkleRoot(unittest.TestCase):
    def test_tree_height_one(self):
        bump = BUMP(100, [[txid(0, A), data(1, B)]])
        self.assertEqual(bump.tree_height, 1)
        self.assertEqual(bump.calculate_merkle_root(), AB)

    def test_right_hand_txid(self):
        bump = BUMP(100, [[data(0, A), txid(1, B)]])
        self.assertEqual(bump.calculate_merkle_root(), AB)

    def test_duplicate_sibling(self):
        bump = BUMP(100, [
            [txid(2, C), dup(3)],
            [data(0, AB)],
        ])
        self.assertEqual(bump.calculate_merkle_root(), ROOT_AB_CC)

    def test_sibling_synthesised_from_children(self):
        bump = BUMP(100, [
            [txid(0, A), data(1, B), txid(2, C), data(3, D)],
            [],
        ])
        self.assertEqual(bump.calculate_merkle_root(), ROOT_ABCD)

    def test_synthesis_two_levels_down(self):
        bump = BUMP(100, [
            [txid(0, A), data(1, B), data(2, C), data(3, D)],
            [],
            [data(1, X)],
        ])
        self.assertEqual(bump.calculate_merkle_root(), ROOT_ABCD_X)

    def test_synthesis_from_duplicated_child(self):
        bump = BUMP(100, [
            [txid(0, A), data(1, B), data(2, C), dup(3)],
            [],
        ])
        self.assertEqual(bump.calculate_merkle_root(), ROOT_AB_CC)

    def test_duplicate_above_base_level(self):
        bump = BUMP(100, [
            [txid(0, A), data(1, B)],
            [dup(1)],
        ])
        self.assertEqual(bump.calculate_merkle_root(), merkle_tree_parent(AB, AB))

    def test_duplicate_on_the_left_above_base_level(self):
        bump = BUMP(100, [
            [data(2, C), txid(3, D)],
            [dup(0)],
        ])
        self.assertEqual(bump.calculate_merkle_root(), merkle_tree_parent(CD, CD))

    def test_path_without_txid_leaves(self):
        bump = BUMP(100, [[data(0, A), data(1, B)]])
        self.assertEqual(bump.calculate_merkle_root(), AB)

    def test_conflicting_climbs(self):
        bump = BUMP(100, [
            [txid(0, A), data(1, B), txid(2, C), data(3, D)],
            [data(1, Z)],
        ])
        with self.assertRaises(StructuralError) as ctx:
            bump.calculate_merkle_root()
        self.assertEqual(ctx.exception.tag, 'bump-internal-mismatch')

    def test_duplicate_at_offset_zero(self):
        bump = BUMP(100, [[dup(0), txid(1, B)]])
        with self.assertRaises(StructuralError) as ctx:
            bump.calculate_merkle_root()
        self.assertEqual(ctx.exception.tag, 'duplicate-at-zero')

    def test_malformed_paths(self):
        cases = [
            BUMP(100, []),
            BUMP(100, [[txid(0, A)]]),
            BUMP(100, [[txid(0, A), data(1, B)], [txid(1, C)]]),
            BUMP(100, [[txid(0, A), data(0, B)]]),
            BUMP(100, [[txid(0, A), data(1, B)], []]),
        ]
        for bump in cases:
            with self.assertRaises(StructuralError) as ctx:
                bump.calculate_merkle_root()
            self.assertEqual(ctx.exception.tag, 'bump-malformed', bump.path)

    def test_contains_txid(self):
        bump = BUMP(100, [[txid(0, A), data(1, B)]])
        self.assertTrue(bump.contains_txid(A))
        self.assertTrue(bump.contains_txid(B))
        self.assertFalse(bump.contains_txid(C))
        self.assertEqual(bump.txids(), [A])


class TestKnownBlocks(unittest.TestCase):
    def test_valid_beef_roots(self):
        decoded = decode_beef(VALID_BEEF)
        roots = {bump.block_height: bump.calculate_merkle_root() for bump in decoded.bumps}
        self.assertEqual(roots, VALID_BEEF_ROOTS)

    def test_bump_with_two_txids(self):
        bump = decode_beef(VALID_BEEF).bumps[1]
        self.assertEqual(len(bump.txids()), 2)
        self.assertEqual(bump.calculate_merkle_root(), VALID_BEEF_ROOTS[818195])

    def test_two_paths_into_one_block(self):
        first = decode_beef(SOMEONE_ELSE_BEEF).bumps[0]
        second = decode_beef(TOO_MUCH_BEEF).bumps[0]
        self.assertNotEqual(first.txids(), second.txids())
        self.assertEqual(first.calculate_merkle_root(), BLOCK_814414_ROOT)
        self.assertEqual(second.calculate_merkle_root(), BLOCK_814414_ROOT)

    def test_request_item(self):
        item = decode_beef(VALID_BEEF).bumps[2].get_merkle_root_request()
        self.assertEqual(item.block_height, 818155)
        self.assertEqual(item.merkle_root, VALID_BEEF_ROOTS[818155])


class TestWireFormat:
    def test_round_trip(self):
        bump = BUMP(818155, [
            [txid(14548, A), data(14549, B)],
            [dup(7275)],
            [data(3636, C)],
        ])
        reader = ByteReader(bump.to_bytes())
        assert BUMP.from_reader(reader) == bump
        assert reader.eof()

    def test_wire_hashes_are_reversed(self):
        leaf_hash = "00" * 31 + "ff"
        raw = BUMP(1, [[txid(0, leaf_hash), dup(1)]]).to_bytes()
        # height, tree height, leaf count, offset, flag, then the hash
        assert raw[5:37] == bytes.fromhex("ff" + "00" * 31)

    def test_unknown_flag(self):
        raw = bytes.fromhex("01" "01" "01" "00" "03") + bytes(32)
        with pytest.raises(DecodeError) as exc:
            BUMP.from_reader(ByteReader(raw))
        assert exc.value.tag == 'bad-leaf-flag'

    def test_tree_height_limit(self):
        tall = bytes.fromhex("01" "41")
        with pytest.raises(DecodeError) as exc:
            BUMP.from_reader(ByteReader(tall))
        assert exc.value.tag == 'tree-too-tall'

        level0 = bytes.fromhex("02" "00" "02") + bytes(32) + bytes.fromhex("01" "01")
        highest = bytes.fromhex("01" "40") + level0 + bytes(63)
        bump = BUMP.from_reader(ByteReader(highest))
        assert bump.tree_height == 64
