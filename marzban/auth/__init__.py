from marzban.auth.password import AuthenticatedTransport, PasswordAuth

__all__ = ["PasswordAuth", "AuthenticatedTransport"]
