from hfgw.gateway.commit import CommitHandler, DefaultCommitHandlers
from hfgw.gateway.config.config import Config
from hfgw.gateway.contract import Contract
from hfgw.gateway.event_hub import EventHub
from hfgw.gateway.exceptions import GatewayError, ConstructionError, StorageError, MalformedIdentity, \
    NoResponsesError, EndorsementError, EvaluationError, SubmitError, CommitError, CommitTimeoutError
from hfgw.gateway.gateway import Gateway
from hfgw.gateway.msp.identity import Identity
from hfgw.gateway.network import Network
from hfgw.gateway.orderer import Orderer
from hfgw.gateway.peer import Peer
from hfgw.gateway.policy import FailFastPolicy, QuorumPolicy
from hfgw.gateway.query import DefaultQueryHandlers
from hfgw.gateway.transaction.proposal import ProposalResponse, Status
from hfgw.gateway.transaction.time_period import TimePeriod, TimeUnit
from hfgw.gateway.transaction.transaction import Transaction, TransactionState
from hfgw.gateway.wallet import FileSystemWallet, InMemoryWallet, Wallet
