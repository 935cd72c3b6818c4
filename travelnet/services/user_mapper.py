"""User Mapper — wire user payload -> domain User."""

from travelnet.core.domain_types import User
from travelnet.schemas.auth import UserPayload


def user_to_domain(payload: UserPayload) -> User:
    return User(
        id=payload.id,
        email=payload.email,
        first_name=payload.first_name,
        last_name=payload.last_name,
        phone=payload.phone,
    )
