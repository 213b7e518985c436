from vellum_auth.context.user_context import UserContext

__all__ = ["UserContext"]
