import logging

from hfgw.gateway.exceptions import EndorsementError, NoResponsesError

_logger = logging.getLogger(__name__)

FAIL_FAST = 'fail-fast'


class EndorsementPolicy(object):
    """Decides whether a set of endorsement responses may be sent for ordering.

    ``check`` returns the successful responses, in the order received, or
    raises. It only looks at response status; whether the endorsements meet
    the chaincode endorsement policy is left to the network.
    """

    def check(self, responses):
        raise NotImplementedError


class FailFastPolicy(EndorsementPolicy):

    def check(self, responses):
        if not responses:
            raise NoResponsesError('No endorsement responses received')

        for response in responses:
            if not response.is_successful:
                _logger.error(f'check - endorsement failure from {response.peer}: {response.message}')
                raise EndorsementError(f'Endorsement failed on peer {response.peer}: {response.message}',
                                       peer=response.peer, responses=responses)

        return list(responses)


class QuorumPolicy(EndorsementPolicy):
    """Accept the responses when at least ``required`` of them succeeded."""

    def __init__(self, required):
        if required < 1:
            raise ValueError(f'Quorum must be at least 1, got {required}')
        self._required = required

    @property
    def required(self):
        return self._required

    def check(self, responses):
        if not responses:
            raise NoResponsesError('No endorsement responses received')

        successes = [r for r in responses if r.is_successful]
        if len(successes) < self._required:
            failures = [f'{r.peer}: {r.message}' for r in responses if not r.is_successful]
            _logger.error(f'check - {len(successes)} of {self._required} required endorsements, failures: {failures}')
            raise EndorsementError(f'Only {len(successes)} of {self._required} required endorsements succeeded.'
                                   f' Errors: {failures}', responses=responses)

        return successes


def get_policy(setting):
    """Resolve an endorsement policy from a config value.

    ``'fail-fast'``, a quorum size as an int, or a policy object.
    """
    if isinstance(setting, EndorsementPolicy):
        return setting
    if setting is None or setting == FAIL_FAST:
        return FailFastPolicy()
    if isinstance(setting, int) and not isinstance(setting, bool):
        return QuorumPolicy(setting)

    raise ValueError(f'Invalid endorsement policy: {setting}')
