"""
Client for the external employee-identity registry.

The registry owns employee identities and organization records. Login and
registration are delegated to it; the scheduling core never calls it.
"""

from typing import Any

import httpx

from shiftboard.core.config import settings
from shiftboard.core.observability import get_logger, record_registry_call
from shiftboard.domain.shared.exceptions import RegistryError

logger = get_logger(__name__)


class EmployeeRegistryClient:
    """Thin synchronous wrapper around the registry's HTTP API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ):
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def _request(
        self, operation: str, method: str, path: str, params: dict[str, Any]
    ) -> httpx.Response:
        try:
            response = self._client.request(method, path, params=params)
        except httpx.HTTPError as e:
            record_registry_call(operation, "error")
            logger.error(
                "Registry request failed",
                operation=operation,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise RegistryError(f"Employee registry unavailable: {str(e)}") from e

        record_registry_call(operation, str(response.status_code))
        return response

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError as e:
            raise RegistryError(
                "Employee registry returned a malformed body", response.status_code
            ) from e
        if not isinstance(body, dict):
            raise RegistryError(
                "Employee registry returned a malformed body", response.status_code
            )
        return body

    def get_employee_info(self, employee_id: str) -> dict[str, Any] | None:
        """Fetch an employee record, or None if the registry does not know the id."""
        response = self._request(
            "get_employee_info", "GET", "/getEmpInfo", {"eid": employee_id}
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        if response.is_error:
            raise RegistryError(
                "Employee registry rejected the lookup", response.status_code
            )
        if not response.content:
            return None
        return self._json(response)

    def register_employee(
        self, name: str, department_id: int, hire_date: str, position: str
    ) -> dict[str, Any]:
        """Create an employee in the registry and return its response body.

        The registry reports its own outcome in the body's ``status`` field.
        """
        response = self._request(
            "register_employee",
            "POST",
            "/addEmployee",
            {
                "name": name,
                "did": department_id,
                "hireDate": hire_date,
                "position": position,
            },
        )
        if response.is_server_error:
            raise RegistryError(
                "Employee registry failed to register the employee",
                response.status_code,
            )
        return self._json(response)

    def get_organization_info(self, client_id: str) -> dict[str, Any]:
        response = self._request(
            "get_organization_info", "GET", "/getOrgInfo", {"cid": client_id}
        )
        if response.is_error:
            raise RegistryError(
                "Failed to retrieve organization info", response.status_code
            )
        return self._json(response)


def create_registry_client() -> EmployeeRegistryClient:
    return EmployeeRegistryClient(
        base_url=settings.REGISTRY_BASE_URL,
        timeout=settings.REGISTRY_TIMEOUT_SECONDS,
    )
