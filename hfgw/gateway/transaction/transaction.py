import asyncio
import logging
from enum import Enum

from hfgw.gateway.exceptions import GatewayError, SubmitError
from hfgw.gateway.msp.identity import Signer
from hfgw.gateway.transaction.proposal import ProposalResponse, Status, build_proposal, build_envelope
from hfgw.gateway.transaction.time_period import TimePeriod
from hfgw.util.utils import send_peers_proposal

_logger = logging.getLogger(__name__)


class TransactionState(Enum):
    CREATED = 'CREATED'
    PROPOSED = 'PROPOSED'
    ENDORSED = 'ENDORSED'
    SUBMITTED = 'SUBMITTED'
    COMMITTED = 'COMMITTED'
    FAILED = 'FAILED'


def _is_acknowledged(ack):
    if ack is None or ack is True:
        return True
    status = getattr(ack, 'status', None)
    return status in (200, 'SUCCESS', Status.SUCCESS)


class Transaction(object):
    """One named chaincode function call on a contract.

    ``evaluate`` queries a single peer and leaves the ledger alone.
    ``submit`` goes through endorsement, ordering and commit, moving the
    transaction through ``TransactionState`` until COMMITTED or FAILED.
    """

    def __init__(self, contract, name):
        if not name:
            raise ValueError('Missing transaction name')

        self._contract = contract
        self._name = name
        self._state = TransactionState.CREATED
        self._transient_map = None
        self._commit_timeout = None
        self._endorsing_peers = None
        self._transaction_id = None

    @property
    def name(self):
        return self._name

    @property
    def state(self):
        return self._state

    @property
    def transaction_id(self):
        """Id of the last proposal built for this transaction, or None."""
        return self._transaction_id

    def set_transient(self, transient_map):
        self._transient_map = dict(transient_map) if transient_map else None
        return self

    def set_commit_timeout(self, timeout):
        self._commit_timeout = TimePeriod.from_setting(timeout) if timeout is not None else None
        return self

    def set_endorsing_peers(self, peers):
        self._endorsing_peers = list(peers) if peers is not None else None
        return self

    def _build_proposal(self, args):
        network = self._contract.network
        signer = Signer(network.gateway.identity)
        proposal = build_proposal(signer, network.name, self._contract.chaincode_id, self._name, args,
                                  self._transient_map)
        self._transaction_id = proposal.transaction_id
        return proposal

    async def evaluate(self, *args):
        method = 'evaluate'
        _logger.debug(f'{method} - start {self._name}')

        proposal = self._build_proposal(args)
        response = await self._contract.network.query_handler.evaluate(proposal)

        _logger.debug(f'{method} - result from {response.peer}')
        return response.payload

    async def submit(self, *args):
        method = 'submit'
        _logger.debug(f'{method} - start {self._name}')

        if self._state != TransactionState.CREATED:
            raise GatewayError(f'Transaction {self._name} cannot be submitted in state {self._state.value}')

        try:
            return await self._submit(args)
        except Exception as e:
            self._state = TransactionState.FAILED
            _logger.error(f'{method} - transaction {self._name} {self._transaction_id} failed: {e}')
            raise

    async def _submit(self, args):
        network = self._contract.network
        gateway = network.gateway

        proposal = self._build_proposal(args)
        self._state = TransactionState.PROPOSED

        responses = await self._send_proposal(proposal)
        valid_responses = gateway.endorsement_policy.check(responses)
        self._state = TransactionState.ENDORSED

        envelope = build_envelope(Signer(gateway.identity), proposal, valid_responses)
        commit_handler = gateway.commit_handler(proposal.transaction_id, network)
        try:
            commit_handler.start_listening()
            await self._send_to_orderer(envelope)
            self._state = TransactionState.SUBMITTED

            timeout = self._commit_timeout if self._commit_timeout is not None else gateway.commit_timeout
            await commit_handler.wait_for_events(timeout)
        finally:
            commit_handler.cancel_listening()

        self._state = TransactionState.COMMITTED
        _logger.debug(f'submit - transaction {proposal.transaction_id} committed')
        return valid_responses[0].payload

    async def _send_proposal(self, proposal):
        method = '_send_proposal'

        if self._endorsing_peers is not None:
            peers = self._endorsing_peers
        else:
            peers = self._contract.network.get_endorsing_peers()

        _logger.debug(f'{method} - sending to {len(peers)} endorsing peers')
        results = await asyncio.gather(*send_peers_proposal(peers, proposal), return_exceptions=True)

        responses = []
        for peer, result in zip(peers, results):
            if isinstance(result, Exception):
                _logger.warning(f'{method} - peer {peer.name} failed: {result}')
                responses.append(ProposalResponse(peer.name, Status.FAILURE, message=str(result)))
            elif isinstance(result, BaseException):
                raise result
            else:
                responses.append(result)
        return responses

    async def _send_to_orderer(self, envelope):
        orderer = self._contract.network.get_orderer()
        _logger.debug(f'_send_to_orderer - broadcast tx {envelope.transaction_id} to {orderer.name}')

        try:
            ack = await orderer.broadcast(envelope)
        except Exception as e:
            raise SubmitError(f'Failed to send transaction {envelope.transaction_id} to orderer {orderer.name}') from e

        if not _is_acknowledged(ack):
            raise SubmitError(f'Orderer {orderer.name} rejected transaction {envelope.transaction_id}:'
                              f' {getattr(ack, "info", ack)}')
