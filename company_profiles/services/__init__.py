"""
Service layer - business logic and orchestration.

Services contain the application's business logic, coordinate between
repositories, and handle cross-cutting concerns.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from company_profiles.services.company_service import CompanyDirectoryService

__all__ = [
    "CompanyDirectoryService",
]
