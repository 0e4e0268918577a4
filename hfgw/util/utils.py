import base64
import json
import logging
import threading
from datetime import datetime, timezone

_logger = logging.getLogger(__name__)


def proto_b(value):
    if isinstance(value, bytes):
        return value
    return str(value).encode('utf-8')


def b64(value):
    return base64.b64encode(value).decode('ascii')


def current_timestamp():
    return datetime.now(timezone.utc).isoformat()


def canonical_json(obj):
    """Compact, key-sorted JSON bytes used for everything that gets signed."""
    return json.dumps(obj, sort_keys=True, separators=(',', ':')).encode('utf-8')


def send_peers_proposal(peers, proposal):
    """Return one send_proposal coroutine per peer, to be gathered by the caller."""
    _logger.debug(f'send_peers_proposal - sending proposal to {len(peers)} peers')
    return [peer.send_proposal(proposal) for peer in peers]


class AtomicIndex(object):
    """An integer that can be read and replaced from several threads."""

    def __init__(self, value=0):
        self._value = value
        self._lock = threading.Lock()

    def get(self):
        with self._lock:
            return self._value

    def set(self, value):
        with self._lock:
            self._value = value

    def get_and_increment(self):
        with self._lock:
            value = self._value
            self._value += 1
            return value
