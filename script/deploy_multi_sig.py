import traceback
from collections.abc import Callable
from dataclasses import dataclass

from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network
from src import multi_sig


class DeploymentFailure(Exception):
    """The MultiSig deploy, or reading the deployed address, blew up."""

    def __init__(self, network: str, cause: BaseException):
        super().__init__(f"MultiSig deployment on {network} failed: {cause!r}")
        self.network = network
        self.cause = cause


@dataclass
class MultiSigDeployment:
    network: str
    contract: VyperContract | None = None
    address: str | None = None
    error: DeploymentFailure | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


def deploy_multi_sig(
    network: str, deployer: Callable[[], VyperContract] = multi_sig.deploy
) -> MultiSigDeployment:
    """
    Deploy MultiSig once and report the address. Failures are printed to
    stderr with their traceback and handed back in the result instead of
    being raised.

    The success line keeps the historical "MutltiSig" spelling.
    """
    print(f"Deploying contracts with network: {network}")
    try:
        multi_sig_contract = deployer()
        address = multi_sig_contract.address
    except Exception as e:
        traceback.print_exception(e)
        return MultiSigDeployment(network=network, error=DeploymentFailure(network, e))

    print(f"MutltiSig deployed at: {address}")
    return MultiSigDeployment(network=network, contract=multi_sig_contract, address=str(address))


def moccasin_main() -> MultiSigDeployment:
    return deploy_multi_sig(get_active_network().name)
