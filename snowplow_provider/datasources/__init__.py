"""Read-only data sources backed by the console API."""

from .base import ApiClientProvider, ConsoleDataSource
from .organization import OrganizationCountError, new_organization_data_source
from .pipeline import new_pipeline_data_source, new_pipelines_data_source
from .user import new_user_data_source, new_users_data_source

DATA_SOURCE_FACTORIES = [
    new_organization_data_source,
    new_user_data_source,
    new_users_data_source,
    new_pipeline_data_source,
    new_pipelines_data_source,
]

__all__ = [
    "ApiClientProvider",
    "ConsoleDataSource",
    "OrganizationCountError",
    "DATA_SOURCE_FACTORIES",
    "new_organization_data_source",
    "new_user_data_source",
    "new_users_data_source",
    "new_pipeline_data_source",
    "new_pipelines_data_source",
]
