from hfgw.gateway.query.handlers import DefaultQueryHandlers, QueryHandler, RoundRobinQueryHandler, SingleQueryHandler
