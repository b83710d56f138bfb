"""Employee registry integration."""

from .employee_registry import EmployeeRegistryClient, create_registry_client

__all__ = ["EmployeeRegistryClient", "create_registry_client"]
