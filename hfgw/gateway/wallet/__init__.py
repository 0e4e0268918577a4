from hfgw.gateway.wallet.file_system_wallet import FileSystemWallet
from hfgw.gateway.wallet.in_memory_wallet import InMemoryWallet
from hfgw.gateway.wallet.wallet import Wallet
