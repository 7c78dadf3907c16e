"""
Merkle root oracles that ask something outside the process.
"""
import asyncio
import logging
from typing import Optional

import requests
from bsv.chaintracker import ChainTracker

from beef_spv.config import OracleConfig
from beef_spv.errors import OracleError
from beef_spv.oracle import MerkleRootConfirmationRequestItem, MerkleRootVerifier

logger = logging.getLogger(__name__)


class HTTPMerkleRootVerifier(MerkleRootVerifier):
    """
    POSTs the request items as a JSON array to a block headers service.

    A 2xx answer confirms every root; any other status rejects the batch.
    """

    def __init__(self, url: str, timeout: float = 10.0, auth_token: Optional[str] = None):
        self.url = url
        self.timeout = timeout
        self.auth_token = auth_token

    @classmethod
    def from_config(cls, config: OracleConfig) -> 'HTTPMerkleRootVerifier':
        if not config.url:
            raise ValueError("oracle url is not configured")
        return cls(config.url, timeout=config.timeout, auth_token=config.auth_token)

    def _headers(self) -> dict:
        headers = {'Content-Type': 'application/json'}
        if self.auth_token:
            headers['Authorization'] = f"Bearer {self.auth_token}"
        return headers

    def _post(self, payload: list) -> requests.Response:
        return requests.post(self.url, json=payload, headers=self._headers(), timeout=self.timeout)

    async def verify_merkle_roots(self, items: list[MerkleRootConfirmationRequestItem]) -> None:
        payload = [item.to_dict() for item in items]
        logger.debug(f"POST {self.url} with {len(payload)} merkle roots")

        try:
            response = await asyncio.to_thread(self._post, payload)
        except requests.RequestException as e:
            logger.error(f"Merkle root oracle at {self.url} unreachable: {e}")
            raise OracleError('oracle-unavailable', f"merkle root oracle unreachable: {e}")

        logger.debug(f"Oracle answered {response.status_code}: {response.text}")
        if not 200 <= response.status_code < 300:
            raise OracleError(
                'merkle-root-mismatch',
                f"merkle roots rejected by oracle with status {response.status_code}"
            )


class ChainTrackerVerifier(MerkleRootVerifier):
    """Checks each root through a bsv ChainTracker, e.g. WhatsOnChainTracker."""

    def __init__(self, chain_tracker: ChainTracker):
        self.chain_tracker = chain_tracker

    async def verify_merkle_roots(self, items: list[MerkleRootConfirmationRequestItem]) -> None:
        for item in items:
            try:
                valid = await self.chain_tracker.is_valid_root_for_height(item.merkle_root, item.block_height)
            except Exception as e:
                logger.error(f"Chain tracker failed at height {item.block_height}: {e}")
                raise OracleError('oracle-unavailable', f"chain tracker failed: {e}")

            if not valid:
                raise OracleError(
                    'merkle-root-mismatch',
                    f"merkle root {item.merkle_root} is not confirmed at height {item.block_height}"
                )
