from usermanagement.domain.user.aggregates.user import User

__all__ = ["User"]
