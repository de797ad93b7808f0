from __future__ import annotations
from status.codes import StatusCode


class ProvisioningError(Exception):
    """A failure that ends the provisioning pass."""

    status = StatusCode.ERROR

    def __init__(self, message: str, status: StatusCode = None) -> None:
        super().__init__(message)
        if status is not None:
            self.status = status


class MediumError(ProvisioningError):
    pass


class ConfigError(ProvisioningError):
    status = StatusCode.NO_CONFIG


class ReportError(ProvisioningError):
    pass


class InterfacesError(ProvisioningError):
    pass


class ProvisioningHalted(BaseException):
    """Raised once the fatal path has delivered its final status.

    Derives from BaseException so no ``except Exception`` in the workflow
    can swallow it.
    """

    def __init__(self, status: StatusCode) -> None:
        super().__init__(f"halted with {status.name}")
        self.status = status
