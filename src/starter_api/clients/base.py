"""Base class for outbound service clients."""

from __future__ import annotations

import abc
import logging
from collections.abc import Callable
from typing import TypeVar

import httpx

from starter_api.core.errors import ApplicationException, remote_service_error

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ServiceClient(abc.ABC):
    """Wraps calls to one remote collaborator.

    Transport and deserialization failures surface as ``RemoteServiceError``
    attributed to ``service_name``. There is no retry: one call, one outcome.
    """

    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    @property
    @abc.abstractmethod
    def service_name(self) -> str:
        """Logical name used for error attribution."""

    def execute_request(self, call: Callable[[], T]) -> T:
        try:
            return call()
        except ApplicationException:
            raise
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers JSON decoding and pydantic validation
            logger.warning("Call to %s failed: %s", self.service_name, e, extra={"service": self.service_name})
            remote_service_error(self.service_name, str(e), cause=e)

    def close(self) -> None:
        self._http.close()
