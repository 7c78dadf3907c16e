"""
Error taxonomy for BEEF decoding and simplified payment verification.

Every error carries a short tag naming the defect, a stable error code, the
HTTP status a paymail server answers with, and whatever context (transaction,
input, BUMP) is known at the point of failure.
"""
from typing import Optional

# tag -> (code, http status, default message)
DECODE_ERRORS = {
    'invalid-hex': ("error-processing-hex", 400, "invalid beef hex stream"),
    'short-envelope': ("error-processing-beef-too-short", 400, "invalid beef hex stream - fewer than 4 bytes"),
    'bad-marker': ("error-processing-beef-marker", 400, "invalid format of transaction, BEEF marker not found"),
    'no-bumps': ("error-processing-beef-no-bumps", 400, "invalid BEEF - lack of BUMPs"),
    'tree-too-tall': ("error-processing-beef-tree-height", 400, "invalid BEEF - treeHeight cannot be greater than 64"),
    'truncated': ("error-processing-beef-truncated", 400, "invalid BEEF - stream ends early"),
    'bad-leaf-flag': ("error-processing-beef-leaf-flag", 400, "invalid BEEF - unknown BUMP leaf flag"),
    'bad-hasbump-flag': ("error-processing-beef-hasbump-flag", 400, "invalid BEEF - unknown hasBump flag"),
    'too-few-transactions': ("error-processing-beef-transactions", 400,
                             "invalid BEEF - not enough transactions provided to decode BEEF"),
    'bad-bump-index': ("error-processing-beef-bump-index", 400, "invalid BEEF - BUMP index out of range"),
}

STRUCTURAL_ERRORS = {
    'bump-internal-mismatch': ("error-spv-bump-root-mismatch", 417, "different merkle roots for the same block"),
    'duplicate-at-zero': ("error-spv-bump-duplicate-at-zero", 417,
                          "invalid BUMP - duplicate leaf at offset 0 of the base level"),
    'bump-malformed': ("error-spv-bump-malformed", 417, "invalid BUMP - path cannot be climbed"),
}

CHAIN_ERRORS = {
    'missing-parent': ("error-spv-bump-mined-parent-not-found", 417,
                       "invalid BUMP - cannot find mined parent for input"),
    'ancestor-not-in-bump': ("error-spv-bump-ancestor-not-present", 417,
                             "invalid BUMP - input mined ancestor is not present in BUMPs"),
}

TRANSACTION_ERRORS = {
    'no-inputs': ("error-spv-no-inputs", 417, "invalid input, no inputs"),
    'no-outputs': ("error-spv-no-outputs", 417, "invalid output, no outputs"),
    'non-final-locktime': ("error-spv-locktime-sequence-invalid", 417,
                           "nLocktime is set and nSequence is not max, therefore this could be a "
                           "non-final tx which is not currently supported"),
    'fee-not-positive': ("error-spv-output-value-too-high", 417,
                         "invalid input and output sum, outputs can not be larger than inputs"),
    'script-failed': ("error-script-invalid", 417, "invalid script"),
}

ORACLE_ERRORS = {
    'merkle-root-mismatch': ("error-spv-merkle-root-mismatch", 417,
                             "merkle roots are not confirmed by the longest chain"),
    'oracle-unavailable': ("error-spv-oracle-unavailable", 503, "merkle root oracle cannot be reached"),
    'cancelled': ("error-spv-cancelled", 499, "simplified payment verification was cancelled"),
}


class SPVError(Exception):
    """Base class for every failure surfaced by the package."""

    TAGS: dict = {}

    def __init__(self,
                 tag: str,
                 message: Optional[str] = None,
                 tx_id: Optional[str] = None,
                 input_index: Optional[int] = None,
                 bump_index: Optional[int] = None):
        if tag not in self.TAGS:
            raise ValueError(f"{type(self).__name__} has no tag '{tag}'")
        self.tag = tag
        self.code, self.status_code, default_message = self.TAGS[tag]
        self.message = message or default_message
        self.tx_id = tx_id
        self.input_index = input_index
        self.bump_index = bump_index
        super().__init__(self._describe())

    def _describe(self) -> str:
        context = []
        if self.tx_id is not None:
            context.append(f"tx {self.tx_id}")
        if self.input_index is not None:
            context.append(f"input {self.input_index}")
        if self.bump_index is not None:
            context.append(f"bump {self.bump_index}")
        if context:
            return f"{self.message} ({', '.join(context)})"
        return self.message

    def to_dict(self) -> dict:
        """Error body in the shape a paymail server returns it."""
        data = {"code": self.code, "message": self.message}
        if self.tx_id is not None:
            data["txId"] = self.tx_id
        if self.input_index is not None:
            data["inputIndex"] = self.input_index
        if self.bump_index is not None:
            data["bumpIndex"] = self.bump_index
        return data


class DecodeError(SPVError):
    """Raised when the envelope bytes are malformed."""
    TAGS = DECODE_ERRORS


class StructuralError(SPVError):
    """Raised when the envelope parses but a BUMP contradicts itself."""
    TAGS = STRUCTURAL_ERRORS


class ChainError(SPVError):
    """Raised when the ancestor graph does not reach a proven transaction."""
    TAGS = CHAIN_ERRORS


class TransactionError(SPVError):
    """Raised when a transaction fails a per-transaction check."""
    TAGS = TRANSACTION_ERRORS


class OracleError(SPVError):
    """Raised when the merkle roots are rejected or cannot be checked."""
    TAGS = ORACLE_ERRORS
