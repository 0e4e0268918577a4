import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from hfgw.gateway import EventHub, Gateway, Identity, Orderer, Peer, ProposalResponse, Status, DefaultCommitHandlers

MSPID = 'Org1MSP'

CERTIFICATE = """-----BEGIN CERTIFICATE-----
MIICGjCCAcCgAwIBAgIRAIQkbh9nsGnLmDalAVlj8sUwCgYIKoZIzj0EAwIwczEL
MAkGA1UEBhMCVVMxEzARBgNVBAgTCkNhbGlmb3JuaWExFjAUBgNVBAcTDVNhbiBG
-----END CERTIFICATE-----
"""


class FakePeer(Peer):

    def __init__(self, name, mspid=MSPID, roles=None, payload=b'', status=Status.SUCCESS, message='',
                 error=None, log=None):
        super(FakePeer, self).__init__(name, mspid, roles)
        self.payload = payload
        self.status = status
        self.message = message
        self.error = error
        self.log = log if log is not None else []
        self.proposals = []

    async def send_proposal(self, proposal, timeout=None):
        self.proposals.append(proposal)
        self.log.append(('send_proposal', self.name))
        if self.error is not None:
            raise self.error
        return ProposalResponse(self.name, self.status, self.payload, self.message)


class FakeOrderer(Orderer):

    def __init__(self, name='orderer0', ack=None, error=None, log=None, on_broadcast=None):
        super(FakeOrderer, self).__init__(name)
        self.ack = ack
        self.error = error
        self.log = log if log is not None else []
        self.on_broadcast = on_broadcast
        self.envelopes = []

    async def broadcast(self, envelope, timeout=None):
        self.envelopes.append(envelope)
        self.log.append(('broadcast', envelope.transaction_id))
        if self.error is not None:
            raise self.error
        if self.on_broadcast is not None:
            self.on_broadcast(envelope)
        return self.ack


class FakeEventHub(EventHub):

    def __init__(self, name, mspid=MSPID, log=None):
        super(FakeEventHub, self).__init__(name, mspid)
        self.log = log if log is not None else []
        self.listeners = {}

    def register_tx_event(self, transaction_id, on_event, on_error):
        self.log.append(('register', self.name))
        self.listeners[transaction_id] = (on_event, on_error)

    def unregister_tx_event(self, transaction_id):
        self.log.append(('unregister', self.name))
        self.listeners.pop(transaction_id, None)

    def commit(self, transaction_id, validation_code='VALID'):
        if transaction_id in self.listeners:
            self.listeners[transaction_id][0](self.name, validation_code)

    def fail(self, transaction_id, error):
        if transaction_id in self.listeners:
            self.listeners[transaction_id][1](self.name, error)


@pytest.fixture
def private_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def identity(private_key):
    return Identity(MSPID, CERTIFICATE, private_key)


@pytest.fixture
def log():
    return []


@pytest.fixture
def gateway(identity):
    return Gateway(identity, commit_handler=DefaultCommitHandlers.NONE)
