import pytest

from hfgw.gateway import ConstructionError, EvaluationError, Status
from hfgw.gateway.query.handlers import SingleQueryHandler, RoundRobinQueryHandler, DefaultQueryHandlers

from conftest import FakePeer

PROPOSAL = object()


def _peers(*specs, log=None):
    log = log if log is not None else []
    peers = []
    for i, ok in enumerate(specs):
        if ok:
            peers.append(FakePeer(f'peer{i}', payload=f'result{i}'.encode(), log=log))
        else:
            peers.append(FakePeer(f'peer{i}', status=Status.FAILURE, message=f'error{i}', log=log))
    return peers


@pytest.mark.parametrize('handler_class', [SingleQueryHandler, RoundRobinQueryHandler])
def test_no_peers_fails_at_construction(handler_class):
    with pytest.raises(ConstructionError):
        handler_class([])


async def test_single_peer_success():
    handler = SingleQueryHandler([FakePeer('peer0', payload=b'successful result')])

    response = await handler.evaluate(PROPOSAL)

    assert response.payload == b'successful result'


async def test_returns_first_success_and_stops():
    log = []
    handler = SingleQueryHandler(_peers(False, True, True, log=log))

    response = await handler.evaluate(PROPOSAL)

    assert response.peer == 'peer1'
    assert log == [('send_proposal', 'peer0'), ('send_proposal', 'peer1')]


async def test_sticks_to_last_successful_peer():
    log = []
    peers = _peers(False, True, True, log=log)
    handler = SingleQueryHandler(peers)
    await handler.evaluate(PROPOSAL)
    log.clear()

    response = await handler.evaluate(PROPOSAL)

    assert response.peer == 'peer1'
    assert log == [('send_proposal', 'peer1')]


async def test_wraps_around_from_cursor():
    log = []
    peers = _peers(True, False, True, log=log)
    handler = SingleQueryHandler(peers)
    # move the cursor to the last peer, then break it
    peers[0].status = Status.FAILURE
    await handler.evaluate(PROPOSAL)
    peers[0].status = Status.SUCCESS
    peers[2].status = Status.FAILURE
    log.clear()

    response = await handler.evaluate(PROPOSAL)

    assert response.peer == 'peer0'
    assert log == [('send_proposal', 'peer2'), ('send_proposal', 'peer0')]


async def test_all_peers_fail():
    peers = _peers(False, False, False)
    peers[1].error = ConnectionError('peer1 unavailable')
    handler = SingleQueryHandler(peers)

    with pytest.raises(EvaluationError) as e:
        await handler.evaluate(PROPOSAL)

    assert e.value.messages == ['error0', 'peer1 unavailable', 'error2']


async def test_all_fail_messages_in_scan_order():
    peers = _peers(False, True, False)
    handler = SingleQueryHandler(peers)
    await handler.evaluate(PROPOSAL)
    peers[1].status = Status.FAILURE

    with pytest.raises(EvaluationError) as e:
        await handler.evaluate(PROPOSAL)

    assert e.value.messages == ['error1', 'error2', 'error0']


async def test_round_robin_rotates_start():
    log = []
    handler = RoundRobinQueryHandler(_peers(True, True, True, log=log))

    results = [(await handler.evaluate(PROPOSAL)).peer for _ in range(4)]

    assert results == ['peer0', 'peer1', 'peer2', 'peer0']


async def test_round_robin_fails_over():
    handler = RoundRobinQueryHandler(_peers(False, True))

    assert (await handler.evaluate(PROPOSAL)).peer == 'peer1'
    assert (await handler.evaluate(PROPOSAL)).peer == 'peer1'


def test_default_query_handlers_lookup():
    assert DefaultQueryHandlers.get('MSPID_SCOPE_SINGLE') is DefaultQueryHandlers.MSPID_SCOPE_SINGLE
    with pytest.raises(ValueError):
        DefaultQueryHandlers.get('get')
    with pytest.raises(ValueError):
        DefaultQueryHandlers.get('UNKNOWN')
