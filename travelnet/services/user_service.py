"""User Service — the signed-in user's profile, fetched through the authenticated stack."""

from travelnet.core.domain_types import User
from travelnet.core.repository_protocols import NetworkService
from travelnet.schemas.auth import UserProfileResponse
from travelnet.services.auth_endpoints import AuthEndpoint
from travelnet.services.user_mapper import user_to_domain


class UserService:

    def __init__(self, network_service: NetworkService, endpoints: AuthEndpoint | None = None):
        self.network_service = network_service
        self.endpoints = endpoints or AuthEndpoint()

    async def get_profile(self) -> User:
        response = await self.network_service.execute(self.endpoints.me(), UserProfileResponse)
        return user_to_domain(response.data.user)
