# beef_spv/test_oracle.py
import os
import shutil
import tempfile
from unittest import mock

import msgpack
import pytest
import requests
from bsv.chaintracker import ChainTracker

from beef_spv.config import OracleConfig
from beef_spv.errors import OracleError
from beef_spv.oracle import MerkleRootConfirmationRequestItem, MerkleRootTable
from beef_spv.oracle_client import ChainTrackerVerifier, HTTPMerkleRootVerifier
from beef_spv.vectors import VALID_BEEF_ROOTS

ITEMS = [MerkleRootConfirmationRequestItem(root, height) for height, root in VALID_BEEF_ROOTS.items()]


@pytest.fixture
def temp_dir():
    path = tempfile.mkdtemp()
    yield path
    shutil.rmtree(path)


def test_request_item_wire_shape():
    item = ITEMS[0]
    assert item.to_dict() == {'merkleRoot': VALID_BEEF_ROOTS[818252], 'blockHeight': 818252}
    assert MerkleRootConfirmationRequestItem.from_dict(item.to_dict()) == item


class TestMerkleRootTable:
    @pytest.mark.asyncio
    async def test_confirms_known_roots(self):
        await MerkleRootTable(VALID_BEEF_ROOTS).verify_merkle_roots(ITEMS)

    @pytest.mark.asyncio
    async def test_unknown_height(self):
        table = MerkleRootTable({818252: VALID_BEEF_ROOTS[818252]})
        with pytest.raises(OracleError) as exc:
            await table.verify_merkle_roots(ITEMS)
        assert exc.value.tag == 'merkle-root-mismatch'
        assert "818195" in exc.value.message

    @pytest.mark.asyncio
    async def test_wrong_root(self):
        table = MerkleRootTable(VALID_BEEF_ROOTS)
        table.add(818204, "00" * 32)
        with pytest.raises(OracleError) as exc:
            await table.verify_merkle_roots(ITEMS)
        assert exc.value.tag == 'merkle-root-mismatch'

    def test_msgpack_round_trip(self):
        table = MerkleRootTable(VALID_BEEF_ROOTS)
        data = table.to_bytes()
        assert msgpack.unpackb(data, strict_map_key=False)[818155] == VALID_BEEF_ROOTS[818155]
        assert MerkleRootTable.from_bytes(data).roots == VALID_BEEF_ROOTS

    def test_save_and_load(self, temp_dir):
        path = os.path.join(temp_dir, "tables", "roots.msgpack")
        MerkleRootTable(VALID_BEEF_ROOTS).save(path)
        assert MerkleRootTable.load(path).roots == VALID_BEEF_ROOTS


def http_response(status_code, text=""):
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    return response


class TestHTTPMerkleRootVerifier:
    @pytest.mark.asyncio
    async def test_posts_items_as_json(self):
        verifier = HTTPMerkleRootVerifier("http://headers.local/api/v1/chain/merkleroot/verify",
                                          timeout=3, auth_token="secret")
        with mock.patch("beef_spv.oracle_client.requests.post", return_value=http_response(200)) as post:
            await verifier.verify_merkle_roots(ITEMS)

        post.assert_called_once()
        args, kwargs = post.call_args
        assert args == ("http://headers.local/api/v1/chain/merkleroot/verify",)
        assert kwargs['json'] == [item.to_dict() for item in ITEMS]
        assert kwargs['headers']['Authorization'] == "Bearer secret"
        assert kwargs['timeout'] == 3

    @pytest.mark.asyncio
    async def test_any_2xx_confirms(self):
        verifier = HTTPMerkleRootVerifier("http://headers.local/verify")
        with mock.patch("beef_spv.oracle_client.requests.post", return_value=http_response(204)):
            await verifier.verify_merkle_roots(ITEMS)

    @pytest.mark.asyncio
    async def test_non_2xx_rejects(self):
        verifier = HTTPMerkleRootVerifier("http://headers.local/verify")
        with mock.patch("beef_spv.oracle_client.requests.post",
                        return_value=http_response(409, '{"confirmationState": "INVALID"}')):
            with pytest.raises(OracleError) as exc:
                await verifier.verify_merkle_roots(ITEMS)
        assert exc.value.tag == 'merkle-root-mismatch'
        assert "409" in exc.value.message

    @pytest.mark.asyncio
    async def test_unreachable(self):
        verifier = HTTPMerkleRootVerifier("http://headers.local/verify")
        with mock.patch("beef_spv.oracle_client.requests.post",
                        side_effect=requests.ConnectionError("connection refused")):
            with pytest.raises(OracleError) as exc:
                await verifier.verify_merkle_roots(ITEMS)
        assert exc.value.tag == 'oracle-unavailable'
        assert exc.value.status_code == 503

    @pytest.mark.asyncio
    async def test_timeout(self):
        verifier = HTTPMerkleRootVerifier("http://headers.local/verify", timeout=0.1)
        with mock.patch("beef_spv.oracle_client.requests.post", side_effect=requests.Timeout()):
            with pytest.raises(OracleError) as exc:
                await verifier.verify_merkle_roots(ITEMS)
        assert exc.value.tag == 'oracle-unavailable'

    def test_from_config(self):
        verifier = HTTPMerkleRootVerifier.from_config(OracleConfig(url="http://headers.local", timeout=2.5))
        assert verifier.url == "http://headers.local"
        assert verifier.timeout == 2.5
        assert 'Authorization' not in verifier._headers()

        with pytest.raises(ValueError):
            HTTPMerkleRootVerifier.from_config(OracleConfig())


class TableChainTracker(ChainTracker):
    def __init__(self, roots, fail=False):
        self.roots = roots
        self.fail = fail
        self.calls = []

    async def is_valid_root_for_height(self, root: str, height: int) -> bool:
        self.calls.append(height)
        if self.fail:
            raise RuntimeError("service down")
        return self.roots.get(height) == root

    async def current_height(self) -> int:
        return max(self.roots)


class TestChainTrackerVerifier:
    @pytest.mark.asyncio
    async def test_confirms(self):
        tracker = TableChainTracker(VALID_BEEF_ROOTS)
        await ChainTrackerVerifier(tracker).verify_merkle_roots(ITEMS)
        assert tracker.calls == list(VALID_BEEF_ROOTS)

    @pytest.mark.asyncio
    async def test_rejects(self):
        tracker = TableChainTracker({818252: VALID_BEEF_ROOTS[818252]})
        with pytest.raises(OracleError) as exc:
            await ChainTrackerVerifier(tracker).verify_merkle_roots(ITEMS)
        assert exc.value.tag == 'merkle-root-mismatch'
        assert tracker.calls == [818252, 818195]

    @pytest.mark.asyncio
    async def test_tracker_failure(self):
        with pytest.raises(OracleError) as exc:
            await ChainTrackerVerifier(TableChainTracker(VALID_BEEF_ROOTS, fail=True)).verify_merkle_roots(ITEMS)
        assert exc.value.tag == 'oracle-unavailable'
