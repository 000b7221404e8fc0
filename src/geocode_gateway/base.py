"""
Abstract base classes for the gateway's collaborators.

The gateway only talks to the provider through these interfaces,
which keeps it testable without a network.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class UpstreamResponse:
    """Raw status and body returned by the provider."""
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return self.status_code == 200


class UpstreamClient(ABC):
    """
    Abstract base for upstream HTTP clients.

    Clients perform exactly one blocking GET per call. Retries, if
    any are wanted, belong to the concrete client, not the gateway.
    """

    @abstractmethod
    def fetch(self, url: str) -> UpstreamResponse:
        """
        Perform a GET against `url`.

        Args:
            url: Fully built provider URL

        Returns:
            UpstreamResponse with the status code and body text,
            whatever the status

        Raises:
            UpstreamUnavailableError on transport failures
        """
        pass

    def close(self) -> None:
        """Release any held resources. Default is a no-op."""
        pass
