from hfgw.gateway.commit.handlers import CommitHandler, DefaultCommitHandlers, NoCommitHandler, \
    TransactionEventHandler
