import logging
from enum import Enum

from hfgw.gateway.transaction.transaction_id import TransactionID
from hfgw.util.utils import proto_b, b64, canonical_json, current_timestamp

_logger = logging.getLogger(__name__)


class Status(Enum):
    SUCCESS = 'SUCCESS'
    FAILURE = 'FAILURE'


class ProposalResponse(object):

    def __init__(self, peer, status, payload=b'', message='', endorsement=None):
        if isinstance(status, str):
            status = Status(status)
        self.peer = peer
        self.status = status
        self.payload = payload if payload is not None else b''
        self.message = message or ''
        self.endorsement = endorsement

    @property
    def is_successful(self):
        return self.status == Status.SUCCESS

    def __repr__(self):
        return f'ProposalResponse(peer={self.peer}, status={self.status.value}, message={self.message!r})'


class Proposal(object):
    """A signed chaincode invocation request, ready to be sent to peers."""

    def __init__(self, tx_id, channel, chaincode_id, transaction_name, args, transient_map, creator, timestamp):
        self.tx_id = tx_id
        self.channel = channel
        self.chaincode_id = chaincode_id
        self.transaction_name = transaction_name
        self.args = args
        self.transient_map = transient_map
        self.creator = creator
        self.timestamp = timestamp
        self.signature = None

    @property
    def transaction_id(self):
        return self.tx_id.transaction_id

    def header(self):
        return {
            'channel_id': self.channel,
            'tx_id': self.transaction_id,
            'nonce': b64(self.tx_id.nonce),
            'creator': b64(self.creator),
            'timestamp': self.timestamp,
            'chaincode_id': self.chaincode_id,
        }

    def chaincode_input(self):
        return {'args': [b64(proto_b(self.transaction_name))] + [b64(arg) for arg in self.args]}

    @property
    def proposal_bytes(self):
        payload = {'header': self.header(), 'input': self.chaincode_input()}
        if self.transient_map:
            payload['transient_map'] = {k: b64(v) for k, v in self.transient_map.items()}
        return canonical_json(payload)


class Envelope(object):

    def __init__(self, transaction_id, payload, signature):
        self.transaction_id = transaction_id
        self.payload = payload
        self.signature = signature


def build_proposal(signer, channel, chaincode_id, transaction_name, args, transient_map=None):
    method = 'build_proposal'
    _logger.debug(f'{method} - start {transaction_name} on {channel}/{chaincode_id}')

    args = [proto_b(arg) for arg in args]
    if transient_map:
        transient_map = {k: proto_b(v) for k, v in transient_map.items()}

    identity = signer.identity
    tx_id = TransactionID(identity)
    proposal = Proposal(tx_id, channel, chaincode_id, transaction_name, args, transient_map,
                        identity.serialize(), current_timestamp())
    proposal.signature = signer.sign(proposal.proposal_bytes)
    return proposal


def build_envelope(signer, proposal, responses):
    """Assemble and sign the transaction sent to the orderer.

    The transient map only exists for the endorsers and is left out of the
    envelope.
    """
    _logger.debug(f'build_envelope - start tx {proposal.transaction_id}')

    first = responses[0]
    endorsements = [
        {'endorser': r.peer, 'endorsement': b64(r.endorsement) if r.endorsement else None}
        for r in responses
    ]
    payload = canonical_json({
        'header': proposal.header(),
        'input': proposal.chaincode_input(),
        'response_payload': b64(first.payload),
        'endorsements': endorsements,
    })
    return Envelope(proposal.transaction_id, payload, signer.sign(payload))
